"""Utility functions for SQLite adapter."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from user_management.models import User


def row_to_dict(row: Any) -> dict[str, Any]:
    """Convert sqlite3.Row to dictionary.

    Args:
        row: sqlite3.Row object

    Returns:
        Dictionary with column names as keys
    """
    if row is None:
        return {}
    return dict(row)


def parse_datetime(value: str | datetime | None) -> datetime | None:
    """Parse an ISO timestamp column value.

    Args:
        value: String, datetime object, or None

    Returns:
        datetime object or None
    """
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


def row_to_user(row: Any) -> User:
    """Build a User from a users table row."""
    data = row_to_dict(row)
    data["created_date"] = parse_datetime(data.get("created_date"))
    data["is_active"] = bool(data.get("is_active"))
    return User(**data)


def user_to_params(user: User) -> dict[str, Any]:
    """Convert a User to named SQL parameters."""
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "created_date": user.created_date.isoformat() if user.created_date else None,
        "is_active": 1 if user.is_active else 0,
    }
