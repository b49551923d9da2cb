"""Registration, login and profile routes plus auth dependencies (get_current_user, require_admin)."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from taskapi.core.database import get_db
from taskapi.core.errors import ForbiddenError, UnauthenticatedError
from taskapi.core.security import InvalidTokenError, decode_access_token
from taskapi.models import User
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
from taskapi.services import accounts

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """Dependency: require valid Bearer JWT and return the current user. Raises 401 if missing or invalid."""
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError("Access denied. No token provided.")
    try:
        identity = decode_access_token(credentials.credentials)
    except InvalidTokenError:
        raise UnauthenticatedError("Invalid or expired token")
    # A token outlives nothing: the account must still exist right now.
    user = db.get(User, identity.id)
    if user is None:
        raise UnauthenticatedError("Invalid token. User not found.")
    return CurrentUser.model_validate(user)


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require authenticated user with role 'admin'. Raises 403 for non-admin."""
    if not current_user.is_admin:
        raise ForbiddenError("Access denied. Insufficient permissions.")
    return current_user


@router.post(
    "/register",
    response_model=ApiResponse[AuthData],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse[AuthData]:
    """Create an account and return it with a bearer token for immediate use."""
    user, token = accounts.register(db, body)
    return ApiResponse[AuthData](
        success=True,
        message="User registered successfully",
        data=AuthData(user=UserPublic.model_validate(user), token=token),
    )


@router.post("/login", response_model=ApiResponse[AuthData], response_model_exclude_unset=True)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse[AuthData]:
    """
    Authenticate with email and password; returns the user and a JWT.
    Include the token in the Authorization header as: Bearer <token>
    """
    user, token = accounts.login(db, body.email, body.password)
    return ApiResponse[AuthData](
        success=True,
        message="Login successful",
        data=AuthData(user=UserPublic.model_validate(user), token=token),
    )


@router.get("/profile", response_model=ApiResponse[ProfileData], response_model_exclude_unset=True)
def get_profile(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse[ProfileData]:
    user = accounts.get_profile(db, current_user)
    return ApiResponse[ProfileData](
        success=True, data=ProfileData(user=UserPublic.model_validate(user))
    )


@router.put("/profile", response_model=ApiResponse[ProfileData], response_model_exclude_unset=True)
def update_profile(
    body: ProfileUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse[ProfileData]:
    """Change the caller's username and/or email."""
    user = accounts.update_profile(db, current_user, body)
    return ApiResponse[ProfileData](
        success=True,
        message="Profile updated successfully",
        data=ProfileData(user=UserPublic.model_validate(user)),
    )
