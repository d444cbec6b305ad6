"""SQLite implementation of UserService."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from user_management.adapters.sqlite.connection import get_connection
from user_management.adapters.sqlite.utils import row_to_user, user_to_params
from user_management.adapters.validation import is_valid_user
from user_management.models import User
from user_management.services.user_service import UserService
from user_management.utils.logger import get_logger


class SqliteUserService(UserService):
    """SQLite implementation of the user service."""

    def __init__(self, db_path: str | Path | None = None):
        """Initialize SQLite user service.

        Args:
            db_path: Optional database file path. If None, uses default location.
        """
        self.db_path = db_path
        self._connection: sqlite3.Connection | None = None

    @property
    def connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._connection is None:
            self._connection = get_connection(self.db_path)
        return self._connection

    def get_user(self, user_id: int) -> User | None:
        """Get a user by ID."""
        cursor = self.connection.execute("SELECT * FROM users WHERE id = ?", (user_id,))
        row = cursor.fetchone()
        return row_to_user(row) if row else None

    def get_user_by_email(self, email: str) -> User | None:
        """Get a user by email (case-insensitive via column collation)."""
        cursor = self.connection.execute(
            "SELECT * FROM users WHERE email = ?", (email,)
        )
        row = cursor.fetchone()
        return row_to_user(row) if row else None

    def save_user(self, user: User) -> bool:
        """Insert a new user or update an existing one.

        Returns False on a duplicate email or when the ID does not exist.
        """
        params = user_to_params(user)
        try:
            if user.id is None:
                cursor = self.connection.execute(
                    """
                    INSERT INTO users (name, email, created_date, is_active)
                    VALUES (:name, :email, :created_date, :is_active)
                    """,
                    params,
                )
            else:
                cursor = self.connection.execute(
                    """
                    UPDATE users
                    SET name = :name, email = :email,
                        created_date = :created_date, is_active = :is_active
                    WHERE id = :id
                    """,
                    params,
                )
        except sqlite3.IntegrityError as e:
            self.connection.rollback()
            get_logger().debug("user save rejected: %s", e)
            return False

        if cursor.rowcount == 0:
            self.connection.rollback()
            return False

        self.connection.commit()
        if user.id is None:
            user.id = cursor.lastrowid
        return True

    def delete_user(self, user_id: int) -> bool:
        """Delete a user."""
        cursor = self.connection.execute("DELETE FROM users WHERE id = ?", (user_id,))
        self.connection.commit()
        return cursor.rowcount > 0

    def get_active_users(self) -> list[User]:
        """List active users ordered by ID."""
        cursor = self.connection.execute(
            "SELECT * FROM users WHERE is_active = 1 ORDER BY id"
        )
        return [row_to_user(row) for row in cursor.fetchall()]

    def validate_user(self, user: User) -> bool:
        """Require a non-blank name and a plausible email."""
        return is_valid_user(user)
