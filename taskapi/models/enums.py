"""Closed value sets shared by ORM models, schemas and the authorization policy."""

from enum import Enum


class UserRole(str, Enum):
    user = "user"
    admin = "admin"


class TaskStatus(str, Enum):
    pending = "pending"
    in_progress = "in-progress"
    completed = "completed"


class TaskPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
