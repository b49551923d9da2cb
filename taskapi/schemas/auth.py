"""Request/response schemas for registration, login and profile endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from taskapi.models.enums import UserRole
from taskapi.schemas.common import (
    PASSWORD_MAX_LEN,
    check_password_strength,
    check_username,
    normalize_email,
)


class RegisterRequest(BaseModel):
    """New account. Role defaults to 'user'."""

    username: str = Field(..., description="3-50 letters, digits or underscores")
    email: EmailStr = Field(..., description="Unique email address")
    password: str = Field(..., description="At least 6 chars with upper, lower and digit")
    role: UserRole = Field(default=UserRole.user, description="user or admin")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        return check_username(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return check_password_strength(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v)


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: EmailStr = Field(..., description="Registered email address")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v)


class ProfileUpdate(BaseModel):
    """Fields a user may change on their own account."""

    username: str | None = None
    email: EmailStr | None = None

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str | None) -> str | None:
        return check_username(v) if v is not None else None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str | None:
        return normalize_email(v) if v is not None else None


class CurrentUser(BaseModel):
    """Authenticated caller (id, username, email, role) passed to every operation."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    username: str
    email: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.admin


class UserPublic(BaseModel):
    """User fields safe to return to clients (no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    role: UserRole
    created_at: datetime | None = None


class AuthData(BaseModel):
    """Payload of register and login: the user plus a bearer token."""

    user: UserPublic
    token: str = Field(..., description="JWT; send as 'Authorization: Bearer <token>'")


class ProfileData(BaseModel):
    user: UserPublic
