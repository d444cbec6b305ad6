"""Configuration service for the usermgmt CLI.

This module provides the ConfigService class, the single source of truth for
configuration. It handles:

- Loading and saving config.json
- Dot-separated key access (``storage.backend``)
- Building the configured UserService backend and UserController
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from user_management.adapters.memory import InMemoryUserService
from user_management.adapters.sqlite import SqliteUserService
from user_management.controllers import UserController
from user_management.models.config_models import AppConfig
from user_management.services.user_service import UserService
from user_management.utils.logger import get_logger


class ConfigService:
    """Service for loading, saving and querying the application configuration."""

    def __init__(self):
        """Initialize the config service."""
        self.config_dir = Path(user_config_dir("usermgmt"))
        self.config_path = self.config_dir / "config.json"

        self._config: AppConfig | None = None
        self._user_service: UserService | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from config.json.

        A missing file yields the defaults. So does an unreadable one, after a
        warning is logged.
        """
        try:
            with open(self.config_path, encoding="utf-8") as f:
                return AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            return AppConfig()
        except (OSError, ValidationError) as e:
            get_logger().warning("ignoring unreadable config %s: %s", self.config_path, e)
            return AppConfig()

    def save_config(self) -> None:
        """Save the current configuration to config.json."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w", encoding="utf-8") as f:
            f.write(self.config.model_dump_json(indent=4))

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name a configuration field
        """
        return self._get_from(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key and save.

        Raises:
            KeyError: If the key does not name a configuration field
            pydantic.ValidationError: If the value is invalid for the field
        """
        self.get(key)
        parts = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for part in parts[:-1]:
            current = current[part]
        current[parts[-1]] = value

        self._config = AppConfig.model_validate(config_dict)
        self._user_service = None
        self.save_config()

    def reset(self, key: str | None = None) -> None:
        """Reset the whole configuration, or a single key, to defaults."""
        if key is None:
            self._config = AppConfig()
            self._user_service = None
            self.save_config()
            return

        default_value = self._get_from(AppConfig(), key)
        self.set(key, default_value)

    @staticmethod
    def _get_from(config: AppConfig, key: str) -> Any:
        value: Any = config
        for part in key.split("."):
            if not isinstance(value, BaseModel) or part not in type(value).model_fields:
                raise KeyError(key)
            value = getattr(value, part)
        return value

    @property
    def user_service(self) -> UserService:
        """The configured user storage backend (built on first use)."""
        if self._user_service is None:
            self._user_service = get_user_service(self.config)
        return self._user_service


def get_user_service(config: AppConfig | None = None) -> UserService:
    """Build the UserService backend selected by the configuration.

    Args:
        config: Configuration to use; defaults to the loaded configuration

    Returns:
        InMemoryUserService or SqliteUserService
    """
    if config is None:
        return get_config_service().user_service

    if config.storage.backend == "memory":
        return InMemoryUserService()
    return SqliteUserService(db_path=config.storage.path)


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get the cached ConfigService instance."""
    return ConfigService()


def get_user_controller() -> UserController:
    """Factory function to get a UserController over the configured backend."""
    return UserController(get_user_service())
