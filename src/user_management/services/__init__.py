"""Services module for user management - the storage contract and configuration."""

from .user_service import UserService

__all__ = [
    "UserService",
]
