"""Response envelope and field rules shared by request schemas."""

import re
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")

USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 50
USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128
EMAIL_MAX_LEN = 100


class ApiResponse(BaseModel, Generic[DataT]):
    """
    Envelope shared by every endpoint: {success, message?, data?, errors?}.

    Routes use response_model_exclude_unset so that keys never assigned are
    left out of the JSON body.
    """

    success: bool = Field(..., description="False for every error response")
    message: str | None = Field(default=None, description="Human-readable outcome")
    data: DataT | None = Field(default=None, description="Payload for successful calls")


def check_username(value: str) -> str:
    """Trim and validate a username; raises ValueError with a user-facing message."""
    value = value.strip()
    if not (USERNAME_MIN_LEN <= len(value) <= USERNAME_MAX_LEN):
        raise ValueError(
            f"Username must be between {USERNAME_MIN_LEN} and {USERNAME_MAX_LEN} characters"
        )
    if not USERNAME_PATTERN.match(value):
        raise ValueError("Username can only contain letters, numbers, and underscores")
    return value


def check_password_strength(value: str) -> str:
    if not (PASSWORD_MIN_LEN <= len(value) <= PASSWORD_MAX_LEN):
        raise ValueError(
            f"Password must be between {PASSWORD_MIN_LEN} and {PASSWORD_MAX_LEN} characters long"
        )
    if not (
        any(c.islower() for c in value)
        and any(c.isupper() for c in value)
        and any(c.isdigit() for c in value)
    ):
        raise ValueError(
            "Password must contain at least one lowercase letter, one uppercase letter, and one number"
        )
    return value


def normalize_email(value: str) -> str:
    value = value.strip().lower()
    if len(value) > EMAIL_MAX_LEN:
        raise ValueError(f"Email must not exceed {EMAIL_MAX_LEN} characters")
    return value
