"""
Profile Routes (any authenticated user, always acting on their own profile)

GET    /user/profile                             - Full profile aggregate
POST   /user/profile/phone-numbers               - Add phone number
PUT    /user/profile/phone-numbers/{id}          - Replace phone number
DELETE /user/profile/phone-numbers/{id}          - Remove phone number
POST|PUT|DELETE /user/profile/education[/{id}]
POST|PUT|DELETE /user/profile/experience[/{id}]
POST|PUT|DELETE /user/profile/certifications[/{id}]
POST|PUT|DELETE /user/profile/projects[/{id}]
GET    /user/profile/skills                      - List own skills
POST   /user/profile/skills                      - Add skills by id
DELETE /user/profile/skills/{skill_id}           - Remove skill
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from jobhunter.core.auth import TokenClaims, get_current_user
from jobhunter.schemas.schemas import (
    AddSkillsRequest,
    CertificationCreate,
    CertificationResponse,
    EducationCreate,
    EducationResponse,
    ExperienceCreate,
    ExperienceResponse,
    PhoneNumberCreate,
    PhoneNumberResponse,
    ProjectCreate,
    ProjectResponse,
    SkillResponse,
    UserProfileResponse,
)
from jobhunter.services.profile_service import ProfileRepository, get_profile_repository

router = APIRouter(prefix="/user/profile", tags=["Profile"])


@router.get("", response_model=UserProfileResponse)
def get_profile(
    user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    """Current user's profile with every section in display order."""
    return profiles.get_user_profile(user.user_id)


# ============================================================
# PHONE NUMBERS
# ============================================================

@router.post("/phone-numbers", response_model=PhoneNumberResponse, status_code=201)
def add_phone_number(
    data: PhoneNumberCreate,
    user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    """Marking a number primary demotes the user's other numbers."""
    return profiles.create_phone_number(user.user_id, data)


@router.put("/phone-numbers/{phone_id}", response_model=PhoneNumberResponse)
def update_phone_number(
    phone_id: UUID,
    data: PhoneNumberCreate,
    user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    return profiles.update_phone_number(user.user_id, phone_id, data)


@router.delete("/phone-numbers/{phone_id}", status_code=204)
def delete_phone_number(
    phone_id: UUID,
    user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    profiles.delete_phone_number(user.user_id, phone_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================
# EDUCATION
# ============================================================

@router.post("/education", response_model=EducationResponse, status_code=201)
def add_education(
    data: EducationCreate,
    user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    return profiles.create_education(user.user_id, data)


@router.put("/education/{education_id}", response_model=EducationResponse)
def update_education(
    education_id: UUID,
    data: EducationCreate,
    user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    return profiles.update_education(user.user_id, education_id, data)


@router.delete("/education/{education_id}", status_code=204)
def delete_education(
    education_id: UUID,
    user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    profiles.delete_education(user.user_id, education_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================
# EXPERIENCE
# ============================================================

@router.post("/experience", response_model=ExperienceResponse, status_code=201)
def add_experience(
    data: ExperienceCreate,
    user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    return profiles.create_experience(user.user_id, data)


@router.put("/experience/{experience_id}", response_model=ExperienceResponse)
def update_experience(
    experience_id: UUID,
    data: ExperienceCreate,
    user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    return profiles.update_experience(user.user_id, experience_id, data)


@router.delete("/experience/{experience_id}", status_code=204)
def delete_experience(
    experience_id: UUID,
    user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    profiles.delete_experience(user.user_id, experience_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================
# CERTIFICATIONS
# ============================================================

@router.post("/certifications", response_model=CertificationResponse, status_code=201)
def add_certification(
    data: CertificationCreate,
    user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    return profiles.create_certification(user.user_id, data)


@router.put("/certifications/{certification_id}", response_model=CertificationResponse)
def update_certification(
    certification_id: UUID,
    data: CertificationCreate,
    user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    return profiles.update_certification(user.user_id, certification_id, data)


@router.delete("/certifications/{certification_id}", status_code=204)
def delete_certification(
    certification_id: UUID,
    user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    profiles.delete_certification(user.user_id, certification_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================
# PROJECTS
# ============================================================

@router.post("/projects", response_model=ProjectResponse, status_code=201)
def add_project(
    data: ProjectCreate,
    user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    return profiles.create_project(user.user_id, data)


@router.put("/projects/{project_id}", response_model=ProjectResponse)
def update_project(
    project_id: UUID,
    data: ProjectCreate,
    user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    return profiles.update_project(user.user_id, project_id, data)


@router.delete("/projects/{project_id}", status_code=204)
def delete_project(
    project_id: UUID,
    user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    profiles.delete_project(user.user_id, project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ============================================================
# SKILLS
# ============================================================

@router.get("/skills", response_model=List[SkillResponse])
def list_skills(
    user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    return profiles.get_user_skills(user.user_id)


@router.post("/skills", response_model=List[SkillResponse])
def add_skills(
    data: AddSkillsRequest,
    user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    """Add skills by catalogue id; returns the user's full skill list."""
    return profiles.add_user_skills(user.user_id, data.skill_ids)


@router.delete("/skills/{skill_id}", status_code=204)
def remove_skill(
    skill_id: int,
    user: TokenClaims = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
):
    profiles.remove_user_skill(user.user_id, skill_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
