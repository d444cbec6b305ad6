"""Unit tests for SqliteUserService.

Most tests use an in-memory SQLite database so nothing touches the filesystem.
"""

from __future__ import annotations

import sqlite3
from datetime import UTC, datetime

import pytest

from user_management.adapters.sqlite import SqliteUserService, get_connection
from user_management.adapters.sqlite.connection import close_connections
from user_management.adapters.sqlite.utils import parse_datetime, row_to_user
from user_management.models import User


@pytest.fixture()
def service():
    svc = SqliteUserService(db_path=":memory:")
    yield svc
    close_connections()


def _new_user(name="Ada", email="ada@example.com", is_active=True) -> User:
    return User(
        name=name,
        email=email,
        created_date=datetime(2024, 5, 1, 12, 0, tzinfo=UTC),
        is_active=is_active,
    )


# ---------------------------------------------------------------------------
# Connection
# ---------------------------------------------------------------------------


class TestConnection:
    def test_connection_is_cached_per_path(self):
        assert get_connection(":memory:") is get_connection(":memory:")

    def test_file_database_created_with_schema(self, tmp_path):
        db_path = tmp_path / "nested" / "users.db"

        conn = get_connection(db_path)

        assert db_path.exists()
        tables = {
            row[0]
            for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
        }
        assert "users" in tables

    def test_default_path_uses_data_dir(self, isolated_dirs):
        SqliteUserService().save_user(_new_user())

        assert (isolated_dirs / "users.db").exists()

    def test_close_connections_clears_cache(self):
        first = get_connection(":memory:")
        close_connections()

        assert get_connection(":memory:") is not first


# ---------------------------------------------------------------------------
# Save / lookups
# ---------------------------------------------------------------------------


class TestSaveUser:
    def test_insert_assigns_id(self, service):
        user = _new_user()

        assert service.save_user(user) is True
        assert user.id == 1

    def test_round_trip_fields(self, service):
        user = _new_user()
        service.save_user(user)

        fetched = service.get_user(user.id)
        assert fetched == user

    def test_update_existing(self, service):
        user = _new_user()
        service.save_user(user)
        user.is_active = False

        assert service.save_user(user) is True
        assert service.get_user(user.id).is_active is False

    def test_update_missing_id_returns_false(self, service):
        assert service.save_user(User(id=99, name="Ghost", email="g@example.com")) is False

    def test_update_missing_id_leaves_no_open_transaction(self, tmp_path):
        service = SqliteUserService(db_path=tmp_path / "users.db")

        assert service.save_user(User(id=99, name="Ghost", email="g@example.com")) is False
        assert service.connection.in_transaction is False

    def test_duplicate_email_returns_false(self, service):
        service.save_user(_new_user(email="ada@example.com"))
        duplicate = _new_user(name="Other", email="ADA@example.com")

        assert service.save_user(duplicate) is False
        assert duplicate.id is None

    def test_missing_name_returns_false(self, service):
        assert service.save_user(User(email="x@example.com")) is False

    def test_operational_error_propagates(self, service):
        service.connection.execute("DROP TABLE users")

        with pytest.raises(sqlite3.OperationalError):
            service.save_user(_new_user())


class TestLookups:
    def test_get_user_missing(self, service):
        assert service.get_user(1) is None

    def test_get_user_by_email_case_insensitive(self, service):
        service.save_user(_new_user(email="ada@example.com"))

        assert service.get_user_by_email("ADA@EXAMPLE.COM").name == "Ada"

    def test_get_user_by_email_missing(self, service):
        assert service.get_user_by_email("nobody@example.com") is None

    def test_get_active_users(self, service):
        service.save_user(_new_user(name="A", email="a@example.com"))
        service.save_user(_new_user(name="B", email="b@example.com", is_active=False))
        service.save_user(_new_user(name="C", email="c@example.com"))

        assert [u.name for u in service.get_active_users()] == ["A", "C"]

    def test_delete_user(self, service):
        user = _new_user()
        service.save_user(user)

        assert service.delete_user(user.id) is True
        assert service.delete_user(user.id) is False
        assert service.get_user(user.id) is None

    def test_validate_user(self, service):
        assert service.validate_user(_new_user()) is True
        assert service.validate_user(_new_user(email="not-an-email")) is False


# ---------------------------------------------------------------------------
# Utils
# ---------------------------------------------------------------------------


class TestUtils:
    def test_parse_datetime(self):
        assert parse_datetime(None) is None
        now = datetime.now(UTC)
        assert parse_datetime(now) is now
        assert parse_datetime("2024-05-01T12:00:00+00:00") == datetime(
            2024, 5, 1, 12, 0, tzinfo=UTC
        )

    def test_row_to_user_coerces_active_flag(self):
        conn = sqlite3.connect(":memory:")
        conn.row_factory = sqlite3.Row
        row = conn.execute(
            "SELECT 3 AS id, 'Ada' AS name, 'a@b.c' AS email, "
            "NULL AS created_date, 0 AS is_active"
        ).fetchone()

        user = row_to_user(row)

        assert user.id == 3
        assert user.is_active is False
        assert user.created_date is None
