"""SQLAlchemy declarative Base and shared model configuration."""

from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass


def enum_column_type(enum_cls: type, length: int = 20) -> SAEnum:
    """Store an Enum by its value as plain VARCHAR (portable across PostgreSQL and SQLite)."""
    return SAEnum(
        enum_cls,
        native_enum=False,
        create_constraint=False,
        length=length,
        values_callable=lambda members: [m.value for m in members],
    )
