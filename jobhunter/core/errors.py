from __future__ import annotations

from typing import Any


class JobHunterError(Exception):
    """Base class for every error the API turns into a JSON response."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        detail: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.detail = detail


class ValidationError(JobHunterError):
    """Malformed or missing request fields."""

    def __init__(self, message: str = "Invalid request", detail: Any | None = None) -> None:
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=400,
            detail=detail,
        )


class AuthenticationError(JobHunterError):
    """Missing, invalid or expired credentials."""

    def __init__(
        self,
        message: str = "Invalid credentials",
        code: str = "AUTHENTICATION_FAILED",
        detail: Any | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=code,
            status_code=401,
            detail=detail,
        )


class InvalidTokenError(AuthenticationError):
    """Session token failed signature, structure or expiry checks."""

    def __init__(self, message: str = "Invalid token", detail: Any | None = None) -> None:
        super().__init__(message=message, code="INVALID_TOKEN", detail=detail)


class AuthorizationError(JobHunterError):
    """Valid identity, insufficient role."""

    def __init__(self, message: str = "Insufficient permissions", detail: Any | None = None) -> None:
        super().__init__(
            message=message,
            code="FORBIDDEN",
            status_code=403,
            detail=detail,
        )


class NotFoundError(JobHunterError):
    """Referenced entity is absent or not owned by the caller."""

    def __init__(self, message: str = "Resource not found", detail: Any | None = None) -> None:
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=404,
            detail=detail,
        )


class DuplicateEmailError(JobHunterError):
    def __init__(self, message: str = "Email already exists", detail: Any | None = None) -> None:
        super().__init__(
            message=message,
            code="DUPLICATE_EMAIL",
            status_code=409,
            detail=detail,
        )


class InternalError(JobHunterError):
    """Database, hashing or signing failure."""

    def __init__(
        self,
        message: str = "Internal server error",
        code: str = "INTERNAL_ERROR",
        detail: Any | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=code,
            status_code=500,
            detail=detail,
        )


class HashingError(InternalError):
    def __init__(self, message: str = "Password hashing failed", detail: Any | None = None) -> None:
        super().__init__(message=message, code="HASHING_ERROR", detail=detail)
