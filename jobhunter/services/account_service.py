"""
Account Service - credential checks and role-scoped account creation.

Every creation flow hashes the password first and then writes the base
users row and its role-extension row inside a single unit of work, so
either both rows exist or neither does.
"""

import logging
import uuid

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from jobhunter.core.errors import (
    AuthenticationError,
    DuplicateEmailError,
    InternalError,
    NotFoundError,
)
from jobhunter.core.security import hash_password, verify_against_dummy, verify_password
from jobhunter.db.postgres import get_db_session
from jobhunter.schemas.schemas import (
    CreateAdminRequest,
    CreateApplicantRequest,
    CreateRecruiterRequest,
    CreateUserRequest,
    UserResponse,
    UserRole,
)

logger = logging.getLogger(__name__)

USER_COLUMNS = """
    id, email, full_name, role, location, title, about_section, profile_url,
    created_at, updated_at
"""

INSERT_USER_SQL = text(f"""
    INSERT INTO users (id, email, password_hash, full_name, role)
    VALUES (:id, :email, :password_hash, :full_name, :role)
    RETURNING {USER_COLUMNS}
""")


def is_duplicate_email(exc: IntegrityError) -> bool:
    """True when exc is the unique-constraint violation on users.email."""
    message = str(exc.orig).lower()
    pgcode = getattr(exc.orig, "pgcode", None)
    return (pgcode == "23505" or "unique" in message) and "email" in message


class AccountService:
    """Login and the applicant/admin/recruiter creation flows."""

    def authenticate(self, email: str, password: str) -> UserResponse:
        """
        Check credentials.

        Unknown email and wrong password produce the same error so the
        response never reveals which accounts exist.
        """
        try:
            with get_db_session() as db:
                row = db.execute(
                    text(f"SELECT {USER_COLUMNS}, password_hash FROM users WHERE email = :email"),
                    {"email": email.lower()},
                ).mappings().fetchone()
        except SQLAlchemyError as exc:
            raise InternalError("Failed to look up user") from exc

        if row is None:
            # same bcrypt cost as a real check
            matched = verify_against_dummy(password)
        else:
            matched = verify_password(password, row["password_hash"])

        if not matched:
            logger.info("Failed login for %s", email)
            raise AuthenticationError("Invalid credentials")

        logger.info("User %s logged in", row["id"])
        return UserResponse.model_validate(dict(row))

    def create_applicant(self, data: CreateApplicantRequest) -> UserResponse:
        """Public signup. Applicants have no extension row."""
        return self._create_user(data, UserRole.applicant)

    def create_admin(self, data: CreateAdminRequest) -> UserResponse:
        def add_admin(db: Session, user_id: str) -> None:
            db.execute(
                text("INSERT INTO admins (user_id, admin_level) VALUES (:user_id, :admin_level)"),
                {"user_id": user_id, "admin_level": data.admin_level},
            )

        return self._create_user(data, UserRole.admin, add_admin)

    def create_recruiter(self, data: CreateRecruiterRequest) -> UserResponse:
        company_id = str(data.company_id) if data.company_id else None

        def add_recruiter(db: Session, user_id: str) -> None:
            if company_id is not None:
                exists = db.execute(
                    text("SELECT 1 FROM companies WHERE id = :id"),
                    {"id": company_id},
                ).fetchone()
                if not exists:
                    raise NotFoundError(f"Company {company_id} not found")
            db.execute(
                text("INSERT INTO recruiters (user_id, company_id) VALUES (:user_id, :company_id)"),
                {"user_id": user_id, "company_id": company_id},
            )

        return self._create_user(data, UserRole.recruiter, add_recruiter)

    def _create_user(self, data: CreateUserRequest, role: UserRole, add_extension=None) -> UserResponse:
        password_hash = hash_password(data.password)
        user_id = str(uuid.uuid4())

        try:
            with get_db_session() as db:
                row = db.execute(
                    INSERT_USER_SQL,
                    {
                        "id": user_id,
                        "email": data.email.lower(),
                        "password_hash": password_hash,
                        "full_name": data.full_name,
                        "role": role.value,
                    },
                ).mappings().fetchone()
                if add_extension is not None:
                    add_extension(db, user_id)
        except IntegrityError as exc:
            if is_duplicate_email(exc):
                raise DuplicateEmailError() from exc
            raise InternalError(f"Failed to create {role.value}") from exc
        except SQLAlchemyError as exc:
            raise InternalError(f"Failed to create {role.value}") from exc

        logger.info("Created %s account %s", role.value, user_id)
        return UserResponse.model_validate(dict(row))


def get_account_service() -> AccountService:
    """Get account service instance."""
    return AccountService()

