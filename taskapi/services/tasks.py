"""Task operations: existence check, then authorization, then the store call."""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from taskapi.core.errors import ForbiddenError, NotFoundError
from taskapi.models import Task, TaskPriority, TaskStatus
from taskapi.schemas.auth import CurrentUser
from taskapi.schemas.task import TaskCreate, TaskStats, TaskUpdate
from taskapi.services.authorization import can_mutate_task, can_view_task, visible_tasks

logger = logging.getLogger(__name__)


def _load_task(db: Session, task_id: int) -> Task:
    task = (
        db.query(Task)
        .options(joinedload(Task.owner))
        .filter(Task.id == task_id)
        .first()
    )
    if task is None:
        raise NotFoundError("Task not found")
    return task


def _require_mutation(caller: CurrentUser, task: Task, verb: str) -> None:
    if not can_mutate_task(caller, task):
        raise ForbiddenError(f"Access denied. You can only {verb} your own tasks.")


def list_tasks(
    db: Session,
    caller: CurrentUser,
    status: TaskStatus | None = None,
    priority: TaskPriority | None = None,
) -> list[Task]:
    """Tasks visible to the caller, newest first, optionally filtered by status/priority."""
    query = visible_tasks(caller, db.query(Task).options(joinedload(Task.owner)))
    if status is not None:
        query = query.filter(Task.status == status)
    if priority is not None:
        query = query.filter(Task.priority == priority)
    return query.order_by(Task.created_at.desc(), Task.id.desc()).all()


def get_task(db: Session, caller: CurrentUser, task_id: int) -> Task:
    task = _load_task(db, task_id)
    if not can_view_task(caller, task):
        raise ForbiddenError("Access denied. You can only view your own tasks.")
    return task


def create_task(db: Session, caller: CurrentUser, data: TaskCreate) -> Task:
    """Persist a new task owned by the caller."""
    task = Task(
        title=data.title,
        description=data.description,
        status=data.status,
        priority=data.priority,
        user_id=caller.id,
    )
    db.add(task)
    db.commit()
    logger.info("Task created: id=%s owner=%s", task.id, caller.id)
    return _load_task(db, task.id)


def update_task(db: Session, caller: CurrentUser, task_id: int, data: TaskUpdate) -> Task:
    """Apply a partial update. Ownership is never part of the update."""
    task = _load_task(db, task_id)
    _require_mutation(caller, task, "update")
    for field, value in data.changes().items():
        setattr(task, field, value)
    db.commit()
    return _load_task(db, task_id)


def delete_task(db: Session, caller: CurrentUser, task_id: int) -> None:
    task = _load_task(db, task_id)
    _require_mutation(caller, task, "delete")
    db.delete(task)
    db.commit()
    logger.info("Task deleted: id=%s by user=%s", task_id, caller.id)


def task_stats(db: Session, caller: CurrentUser) -> TaskStats:
    """Total, per-status and per-priority counts over the caller's visible tasks."""
    by_status = {s: 0 for s in TaskStatus}
    by_priority = {p: 0 for p in TaskPriority}
    rows = visible_tasks(
        caller,
        db.query(Task.status, Task.priority, func.count(Task.id)),
    ).group_by(Task.status, Task.priority)
    total = 0
    for status, priority, count in rows:
        by_status[TaskStatus(status)] += count
        by_priority[TaskPriority(priority)] += count
        total += count
    return TaskStats(total=total, by_status=by_status, by_priority=by_priority)
