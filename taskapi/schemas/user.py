"""Schemas for admin user management endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator

from taskapi.models.enums import UserRole
from taskapi.schemas.common import check_username, normalize_email


class UserRead(BaseModel):
    """User entry for admin views (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    role: UserRole
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserUpdate(BaseModel):
    """Admin edit of another account; omitted fields stay unchanged."""

    username: str | None = None
    email: EmailStr | None = None
    role: UserRole | None = None

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str | None) -> str | None:
        return check_username(v) if v is not None else None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str | None:
        return normalize_email(v) if v is not None else None


class UserData(BaseModel):
    user: UserRead


class UsersListData(BaseModel):
    """Response for GET /users (admin only)."""

    users: list[UserRead]
    count: int
