"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator
from typing import Optional, List
from datetime import date, datetime
from enum import Enum
from uuid import UUID


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    applicant = "applicant"
    recruiter = "recruiter"
    admin = "admin"


class PhoneType(str, Enum):
    mobile = "mobile"
    home = "home"
    work = "work"
    other = "other"


class EmploymentType(str, Enum):
    full_time = "full-time"
    part_time = "part-time"
    contract = "contract"
    internship = "internship"
    freelance = "freelance"
    volunteer = "volunteer"


class MediaType(str, Enum):
    image = "image"
    video = "video"
    document = "document"


# bcrypt only uses the first 72 bytes of its input
MAX_PASSWORD_LENGTH = 72


def _check_range(start: Optional[date], end: Optional[date], message: str) -> None:
    if start and end and end < start:
        raise ValueError(message)


# ============================================================
# AUTH SCHEMAS
# ============================================================

class CreateUserRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=MAX_PASSWORD_LENGTH)
    full_name: str = Field(..., min_length=6, max_length=255)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class CreateApplicantRequest(CreateUserRequest):
    pass


class CreateAdminRequest(CreateUserRequest):
    admin_level: int = Field(..., ge=1, le=5)


class CreateRecruiterRequest(CreateUserRequest):
    company_id: Optional[UUID] = None


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=MAX_PASSWORD_LENGTH)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class UserResponse(BaseModel):
    id: UUID
    email: str
    full_name: str
    role: UserRole
    location: Optional[str] = None
    title: Optional[str] = None
    about_section: Optional[str] = None
    profile_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class LoginResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UserResponse


class CreateUserResponse(BaseModel):
    message: str
    user: UserResponse


# ============================================================
# COMPANY SCHEMAS
# ============================================================

class CompanyCreate(BaseModel):
    name: str = Field(..., min_length=6, max_length=255)
    description: str = Field(..., min_length=6)


class CompanyUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=6, max_length=255)
    description: Optional[str] = Field(None, min_length=6)

    @model_validator(mode="after")
    def require_one_field(self):
        if self.name is None and self.description is None:
            raise ValueError("At least one field (name or description) must be provided for update")
        return self


class CompanyResponse(BaseModel):
    id: UUID
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class CompanyMessageResponse(BaseModel):
    message: str
    company: CompanyResponse


# ============================================================
# PROFILE CHILD SCHEMAS
# ============================================================

class PhoneNumberCreate(BaseModel):
    phone_number: str = Field(..., min_length=3, max_length=50)
    phone_type: PhoneType
    is_primary: bool = False


class PhoneNumberResponse(BaseModel):
    id: UUID
    user_id: UUID
    phone_number: str
    phone_type: PhoneType
    is_primary: bool
    created_at: datetime
    updated_at: datetime


class MediaResponse(BaseModel):
    id: UUID
    user_id: UUID
    media_type: MediaType
    file_name: str
    file_path: str
    file_size: Optional[int] = None
    mime_type: Optional[str] = None
    alt_text: Optional[str] = None
    description: Optional[str] = None
    education_id: Optional[UUID] = None
    experience_id: Optional[UUID] = None
    certification_id: Optional[UUID] = None
    project_id: Optional[UUID] = None
    created_at: datetime
    updated_at: datetime


class EducationCreate(BaseModel):
    institution_name: str = Field(..., min_length=1, max_length=255)
    degree: str = Field(..., min_length=1, max_length=255)
    field_of_study: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_current: bool = False
    grade_gpa: Optional[str] = None
    description: Optional[str] = None

    @model_validator(mode="after")
    def check_dates(self):
        _check_range(self.start_date, self.end_date, "end_date must not be before start_date")
        return self


class EducationResponse(BaseModel):
    id: UUID
    user_id: UUID
    institution_name: str
    degree: str
    field_of_study: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_current: bool
    grade_gpa: Optional[str] = None
    description: Optional[str] = None
    media: List[MediaResponse] = []
    created_at: datetime
    updated_at: datetime


class ExperienceCreate(BaseModel):
    company_name: str = Field(..., min_length=1, max_length=255)
    position_title: str = Field(..., min_length=1, max_length=255)
    employment_type: EmploymentType
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_current: bool = False
    location: Optional[str] = None
    description: Optional[str] = None

    @model_validator(mode="after")
    def check_dates(self):
        _check_range(self.start_date, self.end_date, "end_date must not be before start_date")
        return self


class ExperienceResponse(BaseModel):
    id: UUID
    user_id: UUID
    company_name: str
    position_title: str
    employment_type: EmploymentType
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_current: bool
    location: Optional[str] = None
    description: Optional[str] = None
    media: List[MediaResponse] = []
    created_at: datetime
    updated_at: datetime


class CertificationCreate(BaseModel):
    certification_name: str = Field(..., min_length=1, max_length=255)
    issuing_organization: str = Field(..., min_length=1, max_length=255)
    issue_date: Optional[date] = None
    expiration_date: Optional[date] = None
    credential_id: Optional[str] = None
    credential_url: Optional[str] = None
    description: Optional[str] = None

    @model_validator(mode="after")
    def check_dates(self):
        _check_range(self.issue_date, self.expiration_date, "expiration_date must not be before issue_date")
        return self


class CertificationResponse(BaseModel):
    id: UUID
    user_id: UUID
    certification_name: str
    issuing_organization: str
    issue_date: Optional[date] = None
    expiration_date: Optional[date] = None
    credential_id: Optional[str] = None
    credential_url: Optional[str] = None
    description: Optional[str] = None
    media: List[MediaResponse] = []
    created_at: datetime
    updated_at: datetime


class ProjectCreate(BaseModel):
    project_name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_ongoing: bool = False
    project_url: Optional[str] = None

    @model_validator(mode="after")
    def check_dates(self):
        _check_range(self.start_date, self.end_date, "end_date must not be before start_date")
        return self


class ProjectResponse(BaseModel):
    id: UUID
    user_id: UUID
    project_name: str
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_ongoing: bool
    project_url: Optional[str] = None
    media: List[MediaResponse] = []
    created_at: datetime
    updated_at: datetime


# ============================================================
# SKILL SCHEMAS
# ============================================================

class SkillResponse(BaseModel):
    id: int
    name: str


class AddSkillsRequest(BaseModel):
    skill_ids: List[int] = Field(..., min_length=1)


# ============================================================
# AGGREGATE PROFILE
# ============================================================

class UserProfileResponse(BaseModel):
    user: UserResponse
    phone_numbers: List[PhoneNumberResponse] = []
    education: List[EducationResponse] = []
    experience: List[ExperienceResponse] = []
    certifications: List[CertificationResponse] = []
    projects: List[ProjectResponse] = []
    skills: List[SkillResponse] = []


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True
