import pytest

from jobhunter.core.errors import HashingError, ValidationError
from jobhunter.core.security import hash_password, verify_password


def test_hash_verifies_and_hides_plaintext():
    hashed = hash_password("secret123")

    assert hashed != "secret123"
    assert hashed.startswith("$2")
    assert verify_password("secret123", hashed)


def test_wrong_password_is_a_mismatch():
    assert verify_password("wrong-one", hash_password("secret123")) is False


def test_same_password_hashes_differently():
    assert hash_password("secret123") != hash_password("secret123")


def test_malformed_hash_is_an_error():
    with pytest.raises(HashingError):
        verify_password("secret123", "not-a-bcrypt-hash")


def test_oversized_plaintext_is_a_mismatch_not_a_bad_hash():
    assert verify_password("x" * 5000, hash_password("secret123")) is False


def test_oversized_password_cannot_be_hashed():
    with pytest.raises(ValidationError):
        hash_password("x" * 5000)
