"""Task routes. Visibility and ownership rules live in taskapi.services.authorization."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from taskapi.api.v1.auth import get_current_user
from taskapi.core.database import get_db
from taskapi.models import TaskPriority, TaskStatus
from taskapi.schemas.auth import CurrentUser
from taskapi.schemas.common import ApiResponse
from taskapi.schemas.task import (
    TaskCreate,
    TaskData,
    TaskListData,
    TaskRead,
    TaskStatsData,
    TaskUpdate,
)
from taskapi.services import tasks as task_service

router = APIRouter()

TaskId = Annotated[int, Path(ge=1, description="Task id")]


@router.get("", response_model=ApiResponse[TaskListData], response_model_exclude_unset=True)
def list_tasks(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    status_filter: Annotated[TaskStatus | None, Query(alias="status")] = None,
    priority: Annotated[TaskPriority | None, Query()] = None,
) -> ApiResponse[TaskListData]:
    """Users get their own tasks; admins get every task."""
    rows = task_service.list_tasks(db, current_user, status=status_filter, priority=priority)
    tasks = [TaskRead.model_validate(t) for t in rows]
    return ApiResponse[TaskListData](
        success=True,
        message="Tasks retrieved successfully",
        data=TaskListData(tasks=tasks, count=len(tasks)),
    )


@router.get("/stats", response_model=ApiResponse[TaskStatsData], response_model_exclude_unset=True)
def get_task_stats(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse[TaskStatsData]:
    """Counts by status and priority over the tasks the caller can see."""
    stats = task_service.task_stats(db, current_user)
    return ApiResponse[TaskStatsData](success=True, data=TaskStatsData(stats=stats))


@router.get("/{task_id}", response_model=ApiResponse[TaskData], response_model_exclude_unset=True)
def get_task(
    task_id: TaskId,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse[TaskData]:
    task = task_service.get_task(db, current_user, task_id)
    return ApiResponse[TaskData](success=True, data=TaskData(task=TaskRead.model_validate(task)))


@router.post(
    "",
    response_model=ApiResponse[TaskData],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_task(
    body: TaskCreate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse[TaskData]:
    task = task_service.create_task(db, current_user, body)
    return ApiResponse[TaskData](
        success=True,
        message="Task created successfully",
        data=TaskData(task=TaskRead.model_validate(task)),
    )


@router.put("/{task_id}", response_model=ApiResponse[TaskData], response_model_exclude_unset=True)
def update_task(
    task_id: TaskId,
    body: TaskUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse[TaskData]:
    task = task_service.update_task(db, current_user, task_id, body)
    return ApiResponse[TaskData](
        success=True,
        message="Task updated successfully",
        data=TaskData(task=TaskRead.model_validate(task)),
    )


@router.delete("/{task_id}", response_model=ApiResponse[None], response_model_exclude_unset=True)
def delete_task(
    task_id: TaskId,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse[None]:
    task_service.delete_task(db, current_user, task_id)
    return ApiResponse[None](success=True, message="Task deleted successfully")
