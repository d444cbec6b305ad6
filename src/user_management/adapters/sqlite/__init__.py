"""SQLite storage backend for users."""

from .connection import close_connections, get_connection
from .user_service import SqliteUserService

__all__ = [
    "SqliteUserService",
    "get_connection",
    "close_connections",
]
