"""Core app configuration, database and logging."""

from app.core.config import get_settings, settings
from app.core.database import get_db
from app.core.logging_config import setup_logging

__all__ = ["get_settings", "settings", "get_db", "setup_logging"]
