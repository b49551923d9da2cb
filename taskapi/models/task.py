"""ORM model for tasks; each task has exactly one owner for its whole lifetime."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from taskapi.models.base import Base, enum_column_type
from taskapi.models.enums import TaskPriority, TaskStatus


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(
        enum_column_type(TaskStatus),
        nullable=False,
        default=TaskStatus.pending,
        index=True,
    )
    priority = Column(
        enum_column_type(TaskPriority),
        nullable=False,
        default=TaskPriority.medium,
    )
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    owner = relationship("User", back_populates="tasks")

    @property
    def user_name(self) -> str | None:
        """Owner's username, exposed in task responses."""
        return self.owner.username if self.owner is not None else None
