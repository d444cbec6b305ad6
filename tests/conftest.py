"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state.
"""

from __future__ import annotations

import logging
import logging.handlers
from datetime import UTC, datetime
from unittest.mock import create_autospec, patch

import pytest

from user_management.models import User
from user_management.services.user_service import UserService


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point every platformdirs location at *tmp_path*.

    Also resets the logger singleton, the config service cache and the
    SQLite connection cache so each test starts clean.
    """
    import user_management.utils.logger as logger_mod
    from user_management.adapters.sqlite.connection import close_connections
    from user_management.services.config_service import get_config_service

    tmpdir = str(tmp_path)
    logger_mod._logger = None
    get_config_service.cache_clear()
    with patch("user_management.utils.logger.user_log_dir", return_value=tmpdir):
        with patch(
            "user_management.services.config_service.user_config_dir",
            return_value=tmpdir,
        ):
            with patch(
                "user_management.adapters.sqlite.connection.user_data_dir",
                return_value=tmpdir,
            ):
                yield tmp_path

    close_connections()
    get_config_service.cache_clear()
    app_logger = logging.getLogger("user_management")
    for handler in list(app_logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.close()
            app_logger.removeHandler(handler)
    logger_mod._logger = None


# ---------------------------------------------------------------------------
# Service doubles
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_user_service():
    """A strict mock of the UserService contract."""
    return create_autospec(UserService, instance=True)


@pytest.fixture()
def make_user():
    """Factory for User records with sensible defaults."""

    def _make(
        user_id: int | None = 1,
        name: str | None = "John Doe",
        email: str | None = "john@example.com",
        is_active: bool = True,
    ) -> User:
        return User(
            id=user_id,
            name=name,
            email=email,
            created_date=datetime(2024, 1, 1, tzinfo=UTC),
            is_active=is_active,
        )

    return _make
