"""
Profile Service - the applicant profile aggregate and its owned records.

Read path:
    get_user_profile() loads the user and every child collection in a
    fixed order, attaching media to education/experience/certification/
    project rows.

Write path:
    phone numbers, education, experience, certifications and projects are
    owner-scoped: update and delete filter on both the row id and the
    caller's user id, so a row that belongs to someone else looks exactly
    like a row that does not exist.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict, List, Tuple

from pydantic import BaseModel
from pydantic import ValidationError as RowValidationError
from sqlalchemy import bindparam, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobhunter.core.errors import InternalError, NotFoundError, ValidationError
from jobhunter.db.postgres import get_db_session
from jobhunter.schemas.schemas import (
    CertificationCreate,
    CertificationResponse,
    EducationCreate,
    EducationResponse,
    ExperienceCreate,
    ExperienceResponse,
    MediaResponse,
    PhoneNumberCreate,
    PhoneNumberResponse,
    ProjectCreate,
    ProjectResponse,
    SkillResponse,
    UserProfileResponse,
    UserResponse,
)

logger = logging.getLogger(__name__)

SKILL_SEARCH_LIMIT = 20


# ============================================================
# MEDIA LOOKUP
# ============================================================

class MediaOwner(str, Enum):
    """Which kind of profile row a media item hangs off."""
    education = "education"
    experience = "experience"
    certification = "certification"
    project = "project"


MEDIA_COLUMNS = """
    id, user_id, media_type, file_name, file_path, file_size, mime_type,
    alt_text, description, education_id, experience_id, certification_id,
    project_id, created_at, updated_at
"""

# one fixed statement per owner kind
_MEDIA_SQL = {
    MediaOwner.education: text(
        f"SELECT {MEDIA_COLUMNS} FROM user_media WHERE education_id = :owner_id ORDER BY created_at ASC"
    ),
    MediaOwner.experience: text(
        f"SELECT {MEDIA_COLUMNS} FROM user_media WHERE experience_id = :owner_id ORDER BY created_at ASC"
    ),
    MediaOwner.certification: text(
        f"SELECT {MEDIA_COLUMNS} FROM user_media WHERE certification_id = :owner_id ORDER BY created_at ASC"
    ),
    MediaOwner.project: text(
        f"SELECT {MEDIA_COLUMNS} FROM user_media WHERE project_id = :owner_id ORDER BY created_at ASC"
    ),
}


def fetch_media(db: Session, owner: MediaOwner, owner_id) -> List[MediaResponse]:
    rows = db.execute(_MEDIA_SQL[owner], {"owner_id": str(owner_id)}).mappings().fetchall()
    return [MediaResponse.model_validate(dict(r)) for r in rows]


# ============================================================
# OWNED RECORD DEFINITIONS
# ============================================================

@dataclass(frozen=True)
class OwnedTable:
    """Static description of one owner-scoped child table."""
    table: str
    label: str
    fields: Tuple[str, ...]
    order_by: str
    response: type

    @property
    def columns(self) -> str:
        return ", ".join(("id", "user_id") + self.fields + ("created_at", "updated_at"))


PHONE_NUMBERS = OwnedTable(
    table="user_phone_numbers",
    label="Phone number",
    fields=("phone_number", "phone_type", "is_primary"),
    order_by="is_primary DESC, created_at ASC",
    response=PhoneNumberResponse,
)

EDUCATION = OwnedTable(
    table="user_education",
    label="Education",
    fields=(
        "institution_name", "degree", "field_of_study", "start_date", "end_date",
        "is_current", "grade_gpa", "description",
    ),
    order_by="is_current DESC, end_date DESC NULLS FIRST, start_date DESC",
    response=EducationResponse,
)

EXPERIENCE = OwnedTable(
    table="user_experience",
    label="Experience",
    fields=(
        "company_name", "position_title", "employment_type", "start_date", "end_date",
        "is_current", "location", "description",
    ),
    order_by="is_current DESC, end_date DESC NULLS FIRST, start_date DESC",
    response=ExperienceResponse,
)

CERTIFICATIONS = OwnedTable(
    table="user_certifications",
    label="Certification",
    fields=(
        "certification_name", "issuing_organization", "issue_date", "expiration_date",
        "credential_id", "credential_url", "description",
    ),
    order_by="issue_date DESC NULLS LAST, created_at DESC",
    response=CertificationResponse,
)

PROJECTS = OwnedTable(
    table="user_projects",
    label="Project",
    fields=("project_name", "description", "start_date", "end_date", "is_ongoing", "project_url"),
    order_by="is_ongoing DESC, end_date DESC NULLS FIRST, start_date DESC",
    response=ProjectResponse,
)


def _bind_values(owned: OwnedTable, data: BaseModel) -> Dict[str, object]:
    """Pull the editable fields off a request body as driver-friendly values."""
    params = {}
    for field in owned.fields:
        value = getattr(data, field)
        if isinstance(value, Enum):
            value = value.value
        elif isinstance(value, date):
            value = value.isoformat()
        params[field] = value
    return params


def contains_pattern(term: str) -> str:
    """LIKE pattern matching term literally anywhere in the value."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


# ============================================================
# REPOSITORY
# ============================================================

class ProfileRepository:
    """Data access for the profile aggregate, its child records and skills."""

    # ---------- aggregate read ----------

    def get_user_profile(self, user_id) -> UserProfileResponse:
        """
        Assemble the full profile for user_id.

        Orderings:
            phone numbers   primary first, then oldest first
            education       current first, then most recent end date
                            (open-ended first), then most recent start
            experience      same as education
            certifications  most recent issue date (undated last), then newest
            projects        ongoing first, then as education
            skills          by name

        Raises:
            NotFoundError: no such user
            InternalError: any query failed; nothing partial is returned
        """
        user_id = str(user_id)
        try:
            with get_db_session() as db:
                user_row = db.execute(
                    text("""
                        SELECT id, email, full_name, role, location, title, about_section,
                               profile_url, created_at, updated_at
                        FROM users WHERE id = :id
                    """),
                    {"id": user_id},
                ).mappings().fetchone()
                if user_row is None:
                    raise NotFoundError("User not found")
                user = UserResponse.model_validate(dict(user_row))

                phone_numbers = self._list_owned(db, PHONE_NUMBERS, user_id)
                education = self._list_owned(db, EDUCATION, user_id)
                experience = self._list_owned(db, EXPERIENCE, user_id)
                certifications = self._list_owned(db, CERTIFICATIONS, user_id)
                projects = self._list_owned(db, PROJECTS, user_id)

                for item in education:
                    item.media = fetch_media(db, MediaOwner.education, item.id)
                for item in experience:
                    item.media = fetch_media(db, MediaOwner.experience, item.id)
                for item in certifications:
                    item.media = fetch_media(db, MediaOwner.certification, item.id)
                for item in projects:
                    item.media = fetch_media(db, MediaOwner.project, item.id)

                skills = self._user_skills(db, user_id)
        except (SQLAlchemyError, RowValidationError) as exc:
            logger.error("Failed to load profile for user %s: %s", user_id, exc)
            raise InternalError(f"Failed to load profile for user {user_id}") from exc

        return UserProfileResponse(
            user=user,
            phone_numbers=phone_numbers,
            education=education,
            experience=experience,
            certifications=certifications,
            projects=projects,
            skills=skills,
        )

    def _list_owned(self, db: Session, owned: OwnedTable, user_id: str) -> list:
        rows = db.execute(
            text(f"SELECT {owned.columns} FROM {owned.table} WHERE user_id = :user_id ORDER BY {owned.order_by}"),
            {"user_id": user_id},
        ).mappings().fetchall()
        return [owned.response.model_validate(dict(r)) for r in rows]

    # ---------- owned record CRUD ----------

    def _create_owned(self, owned: OwnedTable, user_id, data: BaseModel, before=None):
        user_id = str(user_id)
        params = _bind_values(owned, data)
        params.update({"id": str(uuid.uuid4()), "user_id": user_id})
        names = ", ".join(owned.fields)
        values = ", ".join(f":{f}" for f in owned.fields)

        try:
            with get_db_session() as db:
                if before is not None:
                    before(db, user_id, None)
                row = db.execute(
                    text(f"""
                        INSERT INTO {owned.table} (id, user_id, {names})
                        VALUES (:id, :user_id, {values})
                        RETURNING {owned.columns}
                    """),
                    params,
                ).mappings().fetchone()
        except SQLAlchemyError as exc:
            raise InternalError(f"Failed to create {owned.label.lower()}") from exc

        logger.info("Created %s %s for user %s", owned.table, row["id"], user_id)
        return owned.response.model_validate(dict(row))

    def _update_owned(self, owned: OwnedTable, user_id, item_id, data: BaseModel, before=None):
        user_id, item_id = str(user_id), str(item_id)
        params = _bind_values(owned, data)
        params.update({"id": item_id, "user_id": user_id})
        assignments = ", ".join(f"{f} = :{f}" for f in owned.fields)

        try:
            with get_db_session() as db:
                if before is not None:
                    before(db, user_id, item_id)
                row = db.execute(
                    text(f"""
                        UPDATE {owned.table}
                        SET {assignments}, updated_at = CURRENT_TIMESTAMP
                        WHERE id = :id AND user_id = :user_id
                        RETURNING {owned.columns}
                    """),
                    params,
                ).mappings().fetchone()
                # rolls back anything `before` did
                if row is None:
                    raise NotFoundError(f"{owned.label} not found")
        except SQLAlchemyError as exc:
            raise InternalError(f"Failed to update {owned.label.lower()}") from exc

        logger.info("Updated %s %s for user %s", owned.table, item_id, user_id)
        return owned.response.model_validate(dict(row))

    def _delete_owned(self, owned: OwnedTable, user_id, item_id) -> None:
        user_id, item_id = str(user_id), str(item_id)
        try:
            with get_db_session() as db:
                result = db.execute(
                    text(f"DELETE FROM {owned.table} WHERE id = :id AND user_id = :user_id"),
                    {"id": item_id, "user_id": user_id},
                )
                if result.rowcount == 0:
                    raise NotFoundError(f"{owned.label} not found")
        except SQLAlchemyError as exc:
            raise InternalError(f"Failed to delete {owned.label.lower()}") from exc

        logger.info("Deleted %s %s for user %s", owned.table, item_id, user_id)

    # phone numbers

    @staticmethod
    def _primary_clearer(data: PhoneNumberCreate):
        """At most one primary number per user."""
        if not data.is_primary:
            return None

        def clear(db: Session, user_id: str, keep_id) -> None:
            sql = """
                UPDATE user_phone_numbers
                SET is_primary = :off, updated_at = CURRENT_TIMESTAMP
                WHERE user_id = :user_id AND is_primary = :on
            """
            params = {"off": False, "on": True, "user_id": user_id}
            if keep_id is not None:
                sql += " AND id != :keep_id"
                params["keep_id"] = keep_id
            db.execute(text(sql), params)

        return clear

    def create_phone_number(self, user_id, data: PhoneNumberCreate) -> PhoneNumberResponse:
        return self._create_owned(PHONE_NUMBERS, user_id, data, before=self._primary_clearer(data))

    def update_phone_number(self, user_id, phone_id, data: PhoneNumberCreate) -> PhoneNumberResponse:
        return self._update_owned(PHONE_NUMBERS, user_id, phone_id, data, before=self._primary_clearer(data))

    def delete_phone_number(self, user_id, phone_id) -> None:
        self._delete_owned(PHONE_NUMBERS, user_id, phone_id)

    # education

    def create_education(self, user_id, data: EducationCreate) -> EducationResponse:
        return self._create_owned(EDUCATION, user_id, data)

    def update_education(self, user_id, education_id, data: EducationCreate) -> EducationResponse:
        return self._update_owned(EDUCATION, user_id, education_id, data)

    def delete_education(self, user_id, education_id) -> None:
        self._delete_owned(EDUCATION, user_id, education_id)

    # experience

    def create_experience(self, user_id, data: ExperienceCreate) -> ExperienceResponse:
        return self._create_owned(EXPERIENCE, user_id, data)

    def update_experience(self, user_id, experience_id, data: ExperienceCreate) -> ExperienceResponse:
        return self._update_owned(EXPERIENCE, user_id, experience_id, data)

    def delete_experience(self, user_id, experience_id) -> None:
        self._delete_owned(EXPERIENCE, user_id, experience_id)

    # certifications

    def create_certification(self, user_id, data: CertificationCreate) -> CertificationResponse:
        return self._create_owned(CERTIFICATIONS, user_id, data)

    def update_certification(self, user_id, certification_id, data: CertificationCreate) -> CertificationResponse:
        return self._update_owned(CERTIFICATIONS, user_id, certification_id, data)

    def delete_certification(self, user_id, certification_id) -> None:
        self._delete_owned(CERTIFICATIONS, user_id, certification_id)

    # projects

    def create_project(self, user_id, data: ProjectCreate) -> ProjectResponse:
        return self._create_owned(PROJECTS, user_id, data)

    def update_project(self, user_id, project_id, data: ProjectCreate) -> ProjectResponse:
        return self._update_owned(PROJECTS, user_id, project_id, data)

    def delete_project(self, user_id, project_id) -> None:
        self._delete_owned(PROJECTS, user_id, project_id)

    # ---------- skills ----------

    def search_skills(self, q: str, limit: int = SKILL_SEARCH_LIMIT) -> List[SkillResponse]:
        """Case-insensitive substring search over the skill catalogue."""
        q = (q or "").strip()
        if not q:
            raise ValidationError("Search query 'q' is required", detail={"q": "must not be empty"})

        try:
            with get_db_session() as db:
                rows = db.execute(
                    text("""
                        SELECT id, name FROM skills
                        WHERE LOWER(name) LIKE LOWER(:pattern) ESCAPE '\\'
                        ORDER BY name
                        LIMIT :limit
                    """),
                    {"pattern": contains_pattern(q), "limit": limit},
                ).mappings().fetchall()
        except SQLAlchemyError as exc:
            raise InternalError("Failed to search skills") from exc

        return [SkillResponse.model_validate(dict(r)) for r in rows]

    def get_user_skills(self, user_id) -> List[SkillResponse]:
        try:
            with get_db_session() as db:
                return self._user_skills(db, str(user_id))
        except SQLAlchemyError as exc:
            raise InternalError("Failed to load skills") from exc

    def _user_skills(self, db: Session, user_id: str) -> List[SkillResponse]:
        rows = db.execute(
            text("""
                SELECT s.id, s.name
                FROM user_skills us JOIN skills s ON us.skill_id = s.id
                WHERE us.user_id = :user_id
                ORDER BY s.name
            """),
            {"user_id": user_id},
        ).mappings().fetchall()
        return [SkillResponse.model_validate(dict(r)) for r in rows]

    def add_user_skills(self, user_id, skill_ids: List[int]) -> List[SkillResponse]:
        """
        Attach skills to a profile and return the resulting skill list.

        Adding a skill the user already has is a no-op. Every id must refer
        to an existing skill, otherwise nothing is added.
        """
        user_id = str(user_id)
        wanted = sorted(set(skill_ids))

        try:
            with get_db_session() as db:
                found = db.execute(
                    text("SELECT id FROM skills WHERE id IN :ids").bindparams(
                        bindparam("ids", expanding=True)
                    ),
                    {"ids": wanted},
                ).scalars().all()
                missing = sorted(set(wanted) - set(found))
                if missing:
                    raise NotFoundError("Skill not found", detail={"skill_ids": missing})

                for skill_id in wanted:
                    db.execute(
                        text("""
                            INSERT INTO user_skills (user_id, skill_id)
                            VALUES (:user_id, :skill_id)
                            ON CONFLICT (user_id, skill_id) DO NOTHING
                        """),
                        {"user_id": user_id, "skill_id": skill_id},
                    )
                skills = self._user_skills(db, user_id)
        except SQLAlchemyError as exc:
            raise InternalError("Failed to add skills") from exc

        logger.info("User %s added skills %s", user_id, wanted)
        return skills

    def remove_user_skill(self, user_id, skill_id: int) -> None:
        user_id = str(user_id)
        try:
            with get_db_session() as db:
                result = db.execute(
                    text("DELETE FROM user_skills WHERE user_id = :user_id AND skill_id = :skill_id"),
                    {"user_id": user_id, "skill_id": skill_id},
                )
                if result.rowcount == 0:
                    raise NotFoundError("Skill not found in profile")
        except SQLAlchemyError as exc:
            raise InternalError("Failed to remove skill") from exc

        logger.info("User %s removed skill %s", user_id, skill_id)


def get_profile_repository() -> ProfileRepository:
    """Get profile repository instance."""
    return ProfileRepository()
