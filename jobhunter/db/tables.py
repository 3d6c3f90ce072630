"""
Relational schema.

Queries elsewhere are plain SQL through text(); these Table objects only
exist so the schema can be created (metadata.create_all) and kept in one
place.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    Uuid,
    func,
)

metadata = MetaData()


def _timestamps():
    return [
        Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
        Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    ]


def _owner():
    return Column(
        "user_id",
        Uuid(as_uuid=False),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )


users = Table(
    "users",
    metadata,
    Column("id", Uuid(as_uuid=False), primary_key=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("full_name", String(255), nullable=False, server_default=""),
    Column("role", String(20), nullable=False),
    Column("location", String(255)),
    Column("title", String(255)),
    Column("about_section", Text),
    Column("profile_url", String(512)),
    *_timestamps(),
    CheckConstraint("role IN ('applicant', 'recruiter', 'admin')", name="ck_users_role"),
)

companies = Table(
    "companies",
    metadata,
    Column("id", Uuid(as_uuid=False), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("description", Text),
    *_timestamps(),
)

admins = Table(
    "admins",
    metadata,
    Column("user_id", Uuid(as_uuid=False), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("admin_level", Integer, nullable=False),
    CheckConstraint("admin_level BETWEEN 1 AND 5", name="ck_admins_level"),
)

recruiters = Table(
    "recruiters",
    metadata,
    Column("user_id", Uuid(as_uuid=False), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("company_id", Uuid(as_uuid=False), ForeignKey("companies.id", ondelete="SET NULL")),
)

user_phone_numbers = Table(
    "user_phone_numbers",
    metadata,
    Column("id", Uuid(as_uuid=False), primary_key=True),
    _owner(),
    Column("phone_number", String(50), nullable=False),
    Column("phone_type", String(20), nullable=False),
    Column("is_primary", Boolean, nullable=False, server_default="0"),
    *_timestamps(),
    CheckConstraint("phone_type IN ('mobile', 'home', 'work', 'other')", name="ck_user_phone_numbers_type"),
)

user_education = Table(
    "user_education",
    metadata,
    Column("id", Uuid(as_uuid=False), primary_key=True),
    _owner(),
    Column("institution_name", String(255), nullable=False),
    Column("degree", String(255), nullable=False),
    Column("field_of_study", String(255)),
    Column("start_date", Date),
    Column("end_date", Date),
    Column("is_current", Boolean, nullable=False, server_default="0"),
    Column("grade_gpa", String(50)),
    Column("description", Text),
    *_timestamps(),
)

user_experience = Table(
    "user_experience",
    metadata,
    Column("id", Uuid(as_uuid=False), primary_key=True),
    _owner(),
    Column("company_name", String(255), nullable=False),
    Column("position_title", String(255), nullable=False),
    Column("employment_type", String(20), nullable=False),
    Column("start_date", Date),
    Column("end_date", Date),
    Column("is_current", Boolean, nullable=False, server_default="0"),
    Column("location", String(255)),
    Column("description", Text),
    *_timestamps(),
    CheckConstraint(
        "employment_type IN ('full-time', 'part-time', 'contract', 'internship', 'freelance', 'volunteer')",
        name="ck_user_experience_employment_type",
    ),
)

user_certifications = Table(
    "user_certifications",
    metadata,
    Column("id", Uuid(as_uuid=False), primary_key=True),
    _owner(),
    Column("certification_name", String(255), nullable=False),
    Column("issuing_organization", String(255), nullable=False),
    Column("issue_date", Date),
    Column("expiration_date", Date),
    Column("credential_id", String(255)),
    Column("credential_url", String(512)),
    Column("description", Text),
    *_timestamps(),
)

user_projects = Table(
    "user_projects",
    metadata,
    Column("id", Uuid(as_uuid=False), primary_key=True),
    _owner(),
    Column("project_name", String(255), nullable=False),
    Column("description", Text),
    Column("start_date", Date),
    Column("end_date", Date),
    Column("is_ongoing", Boolean, nullable=False, server_default="0"),
    Column("project_url", String(512)),
    *_timestamps(),
)

user_media = Table(
    "user_media",
    metadata,
    Column("id", Uuid(as_uuid=False), primary_key=True),
    _owner(),
    Column("media_type", String(20), nullable=False),
    Column("file_name", String(255), nullable=False),
    Column("file_path", String(1024), nullable=False),
    Column("file_size", BigInteger),
    Column("mime_type", String(100)),
    Column("alt_text", String(255)),
    Column("description", Text),
    Column("education_id", Uuid(as_uuid=False), ForeignKey("user_education.id", ondelete="CASCADE")),
    Column("experience_id", Uuid(as_uuid=False), ForeignKey("user_experience.id", ondelete="CASCADE")),
    Column("certification_id", Uuid(as_uuid=False), ForeignKey("user_certifications.id", ondelete="CASCADE")),
    Column("project_id", Uuid(as_uuid=False), ForeignKey("user_projects.id", ondelete="CASCADE")),
    *_timestamps(),
    CheckConstraint("media_type IN ('image', 'video', 'document')", name="ck_user_media_type"),
    # at most one owner reference may be set
    CheckConstraint(
        "(CASE WHEN education_id IS NULL THEN 0 ELSE 1 END)"
        " + (CASE WHEN experience_id IS NULL THEN 0 ELSE 1 END)"
        " + (CASE WHEN certification_id IS NULL THEN 0 ELSE 1 END)"
        " + (CASE WHEN project_id IS NULL THEN 0 ELSE 1 END) <= 1",
        name="ck_user_media_single_owner",
    ),
)

skills = Table(
    "skills",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False, unique=True),
)

user_skills = Table(
    "user_skills",
    metadata,
    Column("user_id", Uuid(as_uuid=False), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("skill_id", Integer, ForeignKey("skills.id", ondelete="CASCADE"), primary_key=True),
)
