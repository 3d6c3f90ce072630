import uuid
from datetime import datetime, timedelta, timezone

import pytest

from jobhunter.core.auth import TokenService
from jobhunter.core.errors import InvalidTokenError
from jobhunter.schemas.schemas import UserResponse, UserRole


def make_user(role=UserRole.applicant):
    now = datetime.now(timezone.utc)
    return UserResponse(
        id=uuid.uuid4(),
        email="carol@example.com",
        full_name="Carol Example",
        role=role,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def tokens():
    return TokenService(secret_key="unit-test-secret")


def test_issued_token_validates_to_same_identity(tokens):
    user = make_user(UserRole.recruiter)
    claims = tokens.validate_token(tokens.issue_token(user))

    assert claims.user_id == user.id
    assert claims.email == user.email
    assert claims.role == UserRole.recruiter
    assert claims.expires_at - claims.issued_at == timedelta(hours=24)


def test_tokens_issued_in_same_second_differ(tokens):
    user = make_user()
    now = datetime.now(timezone.utc)
    assert tokens.issue_token(user, now=now) != tokens.issue_token(user, now=now)


def test_expired_token_rejected(tokens):
    token = tokens.issue_token(make_user(), now=datetime.now(timezone.utc) - timedelta(hours=25))

    with pytest.raises(InvalidTokenError) as exc_info:
        tokens.validate_token(token)
    assert "expired" in exc_info.value.message


def test_token_from_other_secret_rejected(tokens):
    foreign = TokenService(secret_key="someone-else").issue_token(make_user())
    with pytest.raises(InvalidTokenError):
        tokens.validate_token(foreign)


def test_tampered_payload_rejected(tokens):
    header, payload, signature = tokens.issue_token(make_user()).split(".")
    admin_payload = tokens.issue_token(make_user(UserRole.admin)).split(".")[1]

    with pytest.raises(InvalidTokenError):
        tokens.validate_token(".".join([header, admin_payload, signature]))


@pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
def test_garbage_rejected(tokens, token):
    with pytest.raises(InvalidTokenError):
        tokens.validate_token(token)


def test_empty_secret_refused():
    with pytest.raises(ValueError):
        TokenService(secret_key="")
