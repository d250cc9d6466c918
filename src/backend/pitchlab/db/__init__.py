"""Database module."""

from pitchlab.db.models import Base, Project
from pitchlab.db.session import Database, DatabaseNotConnectedError, database, get_db

__all__ = [
    "Base",
    "Project",
    "Database",
    "DatabaseNotConnectedError",
    "database",
    "get_db",
]
