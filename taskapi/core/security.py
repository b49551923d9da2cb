"""Password hashing and JWT creation/verification for authentication."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from taskapi.core.config import settings
from taskapi.models.enums import UserRole

# Claims every token must carry; PyJWT rejects tokens missing any of them.
REQUIRED_CLAIMS = ["exp", "iat", "iss", "aud", "sub"]


class InvalidTokenError(Exception):
    """Raised when a token fails signature, issuer, audience, expiry or payload checks."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


@dataclass(frozen=True)
class TokenIdentity:
    """Identity carried by an access token."""

    id: int
    username: str
    email: str
    role: UserRole


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode(
        "utf-8"
    )


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    identity: TokenIdentity, expires_delta: timedelta | None = None
) -> str:
    """Create a signed JWT carrying the identity, issuer/audience, iat and exp."""
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(minutes=settings.JWT_EXPIRE_MINUTES))
    payload: dict[str, Any] = {
        "sub": str(identity.id),
        "id": identity.id,
        "username": identity.username,
        "email": identity.email,
        "role": UserRole(identity.role).value,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "exp": expire,
        "iat": now,
    }
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> TokenIdentity:
    """
    Decode and validate a JWT and return the identity it carries.
    Raises InvalidTokenError on a bad signature, wrong issuer/audience, expiry
    or a malformed payload.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise InvalidTokenError("Token expired", e) from e
    except jwt.PyJWTError as e:
        raise InvalidTokenError("Invalid token", e) from e

    try:
        return TokenIdentity(
            id=int(payload["sub"]),
            username=str(payload["username"]),
            email=str(payload["email"]),
            role=UserRole(payload["role"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidTokenError("Invalid token payload", e) from e
