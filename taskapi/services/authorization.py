"""
Authorization policy: who may see or change which task, and who may delete which user.

Every check takes the caller explicitly and is evaluated against the rows
loaded for the current request; nothing is cached between requests.
"""

from sqlalchemy.orm import Query

from taskapi.models import Task, UserRole
from taskapi.schemas.auth import CurrentUser


def _owns_or_admin(caller: CurrentUser, task: Task) -> bool:
    match caller.role:
        case UserRole.admin:
            return True
        case UserRole.user:
            return task.user_id == caller.id
    raise ValueError(f"Unknown role: {caller.role!r}")


def can_view_task(caller: CurrentUser, task: Task) -> bool:
    """Admins see every task; users see only the tasks they own."""
    return _owns_or_admin(caller, task)


def can_mutate_task(caller: CurrentUser, task: Task) -> bool:
    """Same rule as viewing: the owner or any admin."""
    return _owns_or_admin(caller, task)


def visible_tasks(caller: CurrentUser, query: Query) -> Query:
    """
    Restrict a Task query to what the caller may see.

    Applied as a WHERE clause so rows of other owners never leave the store.
    """
    match caller.role:
        case UserRole.admin:
            return query
        case UserRole.user:
            return query.filter(Task.user_id == caller.id)
    raise ValueError(f"Unknown role: {caller.role!r}")


def can_delete_user(caller: CurrentUser, target_id: int) -> bool:
    """Only admins delete accounts, and never their own."""
    return caller.role is UserRole.admin and target_id != caller.id
