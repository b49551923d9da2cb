"""Pydantic request/response schemas."""

from taskapi.schemas.auth import (
    AuthData,
    CurrentUser,
    LoginRequest,
    ProfileData,
    ProfileUpdate,
    RegisterRequest,
    UserPublic,
)
from taskapi.schemas.common import ApiResponse
from taskapi.schemas.health import HealthData
from taskapi.schemas.task import (
    TaskCreate,
    TaskData,
    TaskListData,
    TaskRead,
    TaskStats,
    TaskStatsData,
    TaskUpdate,
)
from taskapi.schemas.user import UserData, UserRead, UsersListData, UserUpdate

__all__ = [
    "ApiResponse",
    "AuthData",
    "CurrentUser",
    "HealthData",
    "LoginRequest",
    "ProfileData",
    "ProfileUpdate",
    "RegisterRequest",
    "TaskCreate",
    "TaskData",
    "TaskListData",
    "TaskRead",
    "TaskStats",
    "TaskStatsData",
    "TaskUpdate",
    "UserData",
    "UserPublic",
    "UserRead",
    "UsersListData",
    "UserUpdate",
]
