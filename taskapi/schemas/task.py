"""Pydantic schemas for task CRUD and task statistics."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taskapi.models.enums import TaskPriority, TaskStatus

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000


def _check_title(value: str) -> str:
    value = value.strip()
    if not (1 <= len(value) <= TITLE_MAX_LENGTH):
        raise ValueError(f"Title must be between 1 and {TITLE_MAX_LENGTH} characters")
    return value


def _check_description(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    if len(value) > DESCRIPTION_MAX_LENGTH:
        raise ValueError(f"Description must not exceed {DESCRIPTION_MAX_LENGTH} characters")
    return value


class TaskCreate(BaseModel):
    """Body of POST /tasks. The owner is always the caller and is never read from input."""

    title: str = Field(..., description="1-200 characters")
    description: str | None = Field(default=None, description="Up to 1000 characters")
    status: TaskStatus = TaskStatus.pending
    priority: TaskPriority = TaskPriority.medium

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _check_title(v)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        return _check_description(v)


class TaskUpdate(BaseModel):
    """
    Partial update for PUT /tasks/{id}.

    Only fields present in the body are applied. An explicit null description
    clears it; null title, status or priority leave the stored value alone.
    """

    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        return _check_title(v) if v is not None else None

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        return _check_description(v)

    def changes(self) -> dict[str, object]:
        """Fields to write: everything sent, minus nulls for non-nullable columns."""
        return {
            name: value
            for name, value in self.model_dump(exclude_unset=True).items()
            if value is not None or name == "description"
        }


class TaskRead(BaseModel):
    """Task as returned to clients; the owner is exposed only by id and username."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None = None
    status: TaskStatus
    priority: TaskPriority
    user_id: int
    user_name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TaskData(BaseModel):
    task: TaskRead


class TaskListData(BaseModel):
    tasks: list[TaskRead]
    count: int


class TaskStats(BaseModel):
    """Counts over the tasks visible to the caller."""

    total: int = 0
    by_status: dict[TaskStatus, int] = Field(default_factory=dict)
    by_priority: dict[TaskPriority, int] = Field(default_factory=dict)


class TaskStatsData(BaseModel):
    stats: TaskStats
