"""Registration, login and self-service profile operations."""

import logging
from functools import lru_cache

from sqlalchemy.orm import Session

from taskapi.core.errors import ConflictError, InvalidCredentialsError, NotFoundError
from taskapi.core.security import (
    TokenIdentity,
    create_access_token,
    hash_password,
    verify_password,
)
from taskapi.models import User
from taskapi.schemas.auth import CurrentUser, ProfileUpdate, RegisterRequest
from taskapi.services.users import ensure_identity_available, find_by_email, find_by_username

logger = logging.getLogger(__name__)


def issue_token(user: User) -> str:
    """Access token for a stored user."""
    return create_access_token(
        TokenIdentity(id=user.id, username=user.username, email=user.email, role=user.role)
    )


def register(db: Session, data: RegisterRequest) -> tuple[User, str]:
    """Create an account and log it in. Email and username clashes are reported separately."""
    if find_by_email(db, data.email) is not None:
        raise ConflictError("User with this email already exists", field="email")
    if find_by_username(db, data.username) is not None:
        raise ConflictError("Username already taken", field="username")

    user = User(
        username=data.username,
        email=data.email,
        password_hash=hash_password(data.password),
        role=data.role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("User registered: id=%s role=%s", user.id, user.role.value)
    return user, issue_token(user)


@lru_cache(maxsize=1)
def _placeholder_hash() -> str:
    # Compared against when the email is unknown so both failures cost one bcrypt check.
    return hash_password("placeholder-Passw0rd")


def login(db: Session, email: str, password: str) -> tuple[User, str]:
    """Check credentials; unknown email and wrong password fail the same way."""
    user = find_by_email(db, email)
    stored_hash = user.password_hash if user is not None else _placeholder_hash()
    if not verify_password(password, stored_hash) or user is None:
        logger.warning("Failed login attempt")
        raise InvalidCredentialsError()
    return user, issue_token(user)


def get_profile(db: Session, caller: CurrentUser) -> User:
    user = db.get(User, caller.id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def update_profile(db: Session, caller: CurrentUser, data: ProfileUpdate) -> User:
    """Change the caller's own username and/or email."""
    user = get_profile(db, caller)
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    ensure_identity_available(
        db, user.id, username=changes.get("username"), email=changes.get("email")
    )
    for field, value in changes.items():
        setattr(user, field, value)
    db.commit()
    db.refresh(user)
    return user
