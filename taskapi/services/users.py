"""Admin user management. Route dependencies restrict these calls to admins."""

import logging

from sqlalchemy.orm import Session

from taskapi.core.errors import ConflictError, ForbiddenError, NotFoundError, SelfDeletionError
from taskapi.models import User
from taskapi.schemas.auth import CurrentUser
from taskapi.schemas.user import UserUpdate
from taskapi.services.authorization import can_delete_user

logger = logging.getLogger(__name__)


def find_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def find_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def ensure_identity_available(
    db: Session,
    user_id: int,
    username: str | None = None,
    email: str | None = None,
) -> None:
    """
    Raise ConflictError if username or email already belongs to another account.

    A match on user_id itself is not a conflict (renaming to the current value).
    """
    if email is not None:
        other = find_by_email(db, email)
        if other is not None and other.id != user_id:
            raise ConflictError("Email already taken by another user", field="email")
    if username is not None:
        other = find_by_username(db, username)
        if other is not None and other.id != user_id:
            raise ConflictError("Username already taken by another user", field="username")


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id).all()


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def update_user(db: Session, user_id: int, data: UserUpdate) -> User:
    """Change username, email and/or role of any account."""
    user = get_user(db, user_id)
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    ensure_identity_available(
        db, user.id, username=changes.get("username"), email=changes.get("email")
    )
    for field, value in changes.items():
        setattr(user, field, value)
    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, caller: CurrentUser, user_id: int) -> None:
    """Delete an account and, through the cascade, every task it owns."""
    user = get_user(db, user_id)
    if user.id == caller.id:
        raise SelfDeletionError()
    if not can_delete_user(caller, user.id):
        raise ForbiddenError()
    db.delete(user)
    db.commit()
    logger.info("User deleted: id=%s by admin=%s", user_id, caller.id)
