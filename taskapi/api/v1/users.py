"""Admin-only user management routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from taskapi.api.v1.auth import require_admin
from taskapi.core.database import get_db
from taskapi.schemas.auth import CurrentUser
from taskapi.schemas.common import ApiResponse
from taskapi.schemas.user import UserData, UserRead, UsersListData, UserUpdate
from taskapi.services import users as user_service

router = APIRouter()

UserId = Annotated[int, Path(ge=1, description="User id")]


@router.get("", response_model=ApiResponse[UsersListData], response_model_exclude_unset=True)
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse[UsersListData]:
    users = [UserRead.model_validate(u) for u in user_service.list_users(db)]
    return ApiResponse[UsersListData](
        success=True,
        message="Users retrieved successfully",
        data=UsersListData(users=users, count=len(users)),
    )


@router.get("/{user_id}", response_model=ApiResponse[UserData], response_model_exclude_unset=True)
def get_user(
    user_id: UserId,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse[UserData]:
    user = user_service.get_user(db, user_id)
    return ApiResponse[UserData](success=True, data=UserData(user=UserRead.model_validate(user)))


@router.put("/{user_id}", response_model=ApiResponse[UserData], response_model_exclude_unset=True)
def update_user(
    user_id: UserId,
    body: UserUpdate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse[UserData]:
    user = user_service.update_user(db, user_id, body)
    return ApiResponse[UserData](
        success=True,
        message="User updated successfully",
        data=UserData(user=UserRead.model_validate(user)),
    )


@router.delete("/{user_id}", response_model=ApiResponse[None], response_model_exclude_unset=True)
def delete_user(
    user_id: UserId,
    admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse[None]:
    """Delete an account and all of its tasks. Admins cannot delete themselves."""
    user_service.delete_user(db, admin, user_id)
    return ApiResponse[None](success=True, message="User deleted successfully")
