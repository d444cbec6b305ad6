"""Database schema definitions for the SQLite user store."""

from __future__ import annotations

SCHEMA_VERSION = 1

CREATE_USERS_TABLE = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT NOT NULL UNIQUE COLLATE NOCASE,
    created_date DATETIME,
    is_active BOOLEAN NOT NULL DEFAULT 1
)
"""

CREATE_USERS_ACTIVE_INDEX = """
CREATE INDEX IF NOT EXISTS idx_users_active ON users(is_active)
"""

ALL_TABLES = [
    CREATE_USERS_TABLE,
]

ALL_INDEXES = [
    CREATE_USERS_ACTIVE_INDEX,
]


def create_schema(connection) -> None:
    """Create all tables and indexes, then record the schema version.

    Args:
        connection: sqlite3.Connection
    """
    for statement in ALL_TABLES + ALL_INDEXES:
        connection.execute(statement)
    connection.execute(f"PRAGMA user_version = {SCHEMA_VERSION}")
    connection.commit()
