"""
Password hashing with bcrypt (passlib).

The work factor is fixed for the life of the process; it comes from
settings so the test suite can run with the minimum number of rounds.
"""

from functools import lru_cache

from passlib.context import CryptContext
from passlib.exc import PasswordSizeError

from jobhunter.core.config import get_settings
from jobhunter.core.errors import HashingError, ValidationError


@lru_cache()
def get_pwd_context() -> CryptContext:
    """Password hashing context, built once from settings."""
    settings = get_settings()
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=settings.password_hash_rounds,
    )


def hash_password(password: str) -> str:
    """
    Hash password with bcrypt.

    Raises:
        ValidationError: the password is too long to hash
        HashingError: the hash could not be computed
    """
    try:
        return get_pwd_context().hash(password)
    except PasswordSizeError as exc:
        raise ValidationError("Password is too long", detail={"password": "too long"}) from exc
    except (ValueError, TypeError) as exc:
        raise HashingError() from exc


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify password against hash.

    Returns False on mismatch, including a plaintext too long to ever
    match. A stored hash that cannot be identified or parsed is an
    error, not a mismatch.

    Raises:
        HashingError: the stored hash is malformed
    """
    try:
        return get_pwd_context().verify(plain_password, hashed_password)
    except PasswordSizeError:
        return False
    except (ValueError, TypeError) as exc:
        raise HashingError("Stored password hash is malformed") from exc


@lru_cache()
def _dummy_hash() -> str:
    return get_pwd_context().hash("unused-placeholder-password")


def verify_against_dummy(plain_password: str) -> bool:
    """Spend the same bcrypt work as a real check, for accounts that don't exist."""
    verify_password(plain_password, _dummy_hash())
    return False
