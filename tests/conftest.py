"""
Shared fixtures.

The application is pointed at a throwaway SQLite file before anything from
jobhunter is imported, so settings, the engine and the token service all
pick up the test configuration.
"""

import os
import tempfile

_tmpdir = tempfile.mkdtemp(prefix="jobhunter-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_tmpdir, 'test.db')}"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["PASSWORD_HASH_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

from jobhunter.core.auth import get_token_service
from jobhunter.db.postgres import engine
from jobhunter.db.tables import metadata
from jobhunter.main import app
from jobhunter.schemas.schemas import (
    CompanyCreate,
    CreateAdminRequest,
    CreateApplicantRequest,
)
from jobhunter.services.account_service import AccountService
from jobhunter.services.company_service import CompanyService

PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def fresh_schema():
    metadata.drop_all(bind=engine)
    metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def accounts():
    return AccountService()


@pytest.fixture
def applicant(accounts):
    return accounts.create_applicant(
        CreateApplicantRequest(email="alice@example.com", password=PASSWORD, full_name="Alice Applicant")
    )


@pytest.fixture
def other_applicant(accounts):
    return accounts.create_applicant(
        CreateApplicantRequest(email="bob@example.com", password=PASSWORD, full_name="Bob Applicant")
    )


@pytest.fixture
def admin(accounts):
    return accounts.create_admin(
        CreateAdminRequest(email="root@example.com", password=PASSWORD, full_name="Root Admin", admin_level=5)
    )


@pytest.fixture
def company():
    return CompanyService().create_company(
        CompanyCreate(name="Acme Corporation", description="Makes everything")
    )


def bearer(user) -> dict:
    return {"Authorization": f"Bearer {get_token_service().issue_token(user)}"}


@pytest.fixture
def applicant_headers(applicant):
    return bearer(applicant)


@pytest.fixture
def admin_headers(admin):
    return bearer(admin)


@pytest.fixture
def skills():
    """Seed the skill catalogue and return {name: id}."""
    with engine.begin() as conn:
        for name in ("Python", "JavaScript", "Java", "PostgreSQL"):
            conn.execute(text("INSERT INTO skills (name) VALUES (:name)"), {"name": name})
        rows = conn.execute(text("SELECT id, name FROM skills")).fetchall()
    return {name: skill_id for skill_id, name in rows}


@pytest.fixture
def headers_for():
    """Build bearer headers for an arbitrary user."""
    return bearer
