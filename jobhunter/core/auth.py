"""
Authentication Utility - session tokens and access control.

Provides:
- TokenService: issues and validates signed (HS256) session tokens
- FastAPI dependencies for protected routes:
    get_current_user       -> authentication only
    require_role(role)     -> authentication, then role check
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Callable, Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import BaseModel

from jobhunter.core.config import get_settings
from jobhunter.core.errors import AuthenticationError, AuthorizationError, InvalidTokenError
from jobhunter.schemas.schemas import UserResponse, UserRole

logger = logging.getLogger(__name__)

TOKEN_TTL = timedelta(hours=24)

# Bearer token extractor; missing/foreign schemes are reported by us as 401
bearer_scheme = HTTPBearer(auto_error=False)


class TokenClaims(BaseModel):
    """Verified identity carried by a session token."""

    user_id: UUID
    email: str
    role: UserRole
    issued_at: datetime
    expires_at: datetime


class TokenService:
    """
    Mints and validates stateless session tokens.

    The signing secret is handed in once and never changes afterwards.
    Tokens are not stored anywhere and cannot be revoked before expiry.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", ttl: timedelta = TOKEN_TTL):
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._ttl = ttl

    def issue_token(self, user: UserResponse, now: Optional[datetime] = None) -> str:
        """Create a signed token for user, valid for the configured TTL."""
        issued_at = now or datetime.now(timezone.utc)
        expires_at = issued_at + self._ttl
        claims = {
            "sub": str(user.id),
            "user_id": str(user.id),
            "email": user.email,
            "role": user.role.value,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
            # keeps tokens issued within the same second distinct
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def validate_token(self, token: str) -> TokenClaims:
        """
        Verify signature and expiry and return the claims.

        Raises:
            InvalidTokenError: bad signature, malformed token, missing
                claims or expired
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require_exp": True, "require_iat": True},
            )
        except ExpiredSignatureError as exc:
            raise InvalidTokenError("Token has expired") from exc
        except JWTError as exc:
            raise InvalidTokenError() from exc

        try:
            return TokenClaims(
                user_id=payload["user_id"],
                email=payload["email"],
                role=payload["role"],
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidTokenError("Token claims are malformed") from exc


@lru_cache()
def get_token_service() -> TokenService:
    """Process-wide token service built from settings."""
    settings = get_settings()
    return TokenService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        ttl=timedelta(minutes=settings.jwt_expire_minutes),
    )


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> TokenClaims:
    """
    FastAPI dependency - authenticate the request.

    Usage:
        @router.get("/protected")
        def route(user: TokenClaims = Depends(get_current_user)):
            return user
    """
    if credentials is None:
        raise AuthenticationError("Authorization header required")

    try:
        claims = tokens.validate_token(credentials.credentials)
    except InvalidTokenError as exc:
        logger.debug("Rejected token: %s", exc.message)
        raise

    request.state.claims = claims
    return claims


def require_role(role: UserRole) -> Callable[..., TokenClaims]:
    """
    Dependency factory - authentication followed by a role check.

    Always runs get_current_user first, so an anonymous caller gets 401
    and an authenticated caller with the wrong role gets 403.
    """

    def _guard(user: TokenClaims = Depends(get_current_user)) -> TokenClaims:
        if user.role != role:
            raise AuthorizationError()
        return user

    return _guard
