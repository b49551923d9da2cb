"""Core app configuration and database."""

from taskapi.core.config import get_settings, settings
from taskapi.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
