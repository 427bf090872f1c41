"""Session token encoding with PyJWT.

Tokens carry the user id in the standard ``sub`` claim plus the display
name, and always expire.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from qna.config import AuthSettings

REQUIRED_CLAIMS = ["sub", "exp", "iat"]


class TokenPayload(BaseModel):
    """Decoded session token."""

    user_id: str
    username: str
    issued_at: datetime
    expires_at: datetime


class JWTError(Exception):
    """Token is malformed, badly signed, incomplete or expired."""


def create_token(
    user_id: str,
    username: str,
    settings: AuthSettings,
    now: datetime | None = None,
) -> str:
    """Encode a session token valid for ``settings.jwt_expiry_days``."""
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "username": username,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode and validate a session token.

    Raises:
        JWTError: If the token is expired, invalid or lacks a required claim
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload(
            user_id=claims["sub"],
            username=claims.get("username", ""),
            issued_at=datetime.fromtimestamp(claims["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
        )
    except (ValidationError, TypeError, ValueError) as e:
        raise JWTError("Invalid token claims") from e
