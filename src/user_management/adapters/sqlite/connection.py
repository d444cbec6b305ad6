"""Database connection management for the SQLite user store.

Connections are cached per database path, configured once (row factory,
schema) and closed at interpreter exit.
"""

from __future__ import annotations

import atexit
import sqlite3
from pathlib import Path

from platformdirs import user_data_dir

from user_management.adapters.sqlite.schema import create_schema
from user_management.utils.logger import get_logger

MEMORY_DB = ":memory:"

_connections: dict[str, sqlite3.Connection] = {}


def default_db_path() -> Path:
    """Default database location inside the user data directory."""
    return Path(user_data_dir("usermgmt")) / "users.db"


def get_connection(db_path: str | Path | None = None) -> sqlite3.Connection:
    """Get or create a database connection.

    Args:
        db_path: Path to database file, ":memory:", or None for the default
            location

    Returns:
        sqlite3.Connection with the users schema in place
    """
    if db_path is None:
        db_path = default_db_path()

    key = str(db_path)
    connection = _connections.get(key)
    if connection is not None:
        return connection

    if key != MEMORY_DB:
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    connection = sqlite3.connect(key, timeout=30.0)
    connection.row_factory = sqlite3.Row
    create_schema(connection)

    get_logger().debug("opened user database: %s", key)
    _connections[key] = connection
    return connection


def close_connections() -> None:
    """Close all cached connections."""
    while _connections:
        _, connection = _connections.popitem()
        connection.commit()
        connection.close()


atexit.register(close_connections)
