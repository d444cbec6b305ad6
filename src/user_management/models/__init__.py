"""User management domain models.

Pydantic models shared by the controller, the storage backends and the CLI.
"""

from .config_models import AppConfig, OutputConfig, StorageConfig
from .user import User

__all__ = [
    "User",
    "AppConfig",
    "OutputConfig",
    "StorageConfig",
]
