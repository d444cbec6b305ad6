"""User service contract.

This module defines the abstract base class (interface) a user-storage
backend must implement, following the hexagonal architecture (Ports &
Adapters) pattern. The controller depends only on this contract; concrete
backends live in ``user_management.adapters``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from user_management.models import User


class UserService(ABC):
    """Abstract base class for user storage operations.

    Lookups return ``None`` when nothing is found; that is not an error.
    Errors raised by an implementation (storage unavailable, etc.) propagate
    to the caller unchanged.
    """

    @abstractmethod
    def get_user(self, user_id: int) -> User | None:
        """Get a user by ID.

        Args:
            user_id: Backend-assigned user identifier

        Returns:
            User object, or None if no user has this ID

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError("UserService.get_user() must be implemented by adapter")

    @abstractmethod
    def get_user_by_email(self, email: str) -> User | None:
        """Get a user by email address.

        Args:
            email: Email address to look up

        Returns:
            User object, or None if no user has this email

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError(
            "UserService.get_user_by_email() must be implemented by adapter"
        )

    @abstractmethod
    def save_user(self, user: User) -> bool:
        """Create or update a user.

        A user without an ID is created and receives its new ID; a user with
        an ID replaces the stored record.

        Args:
            user: User to persist

        Returns:
            True if the user was persisted, False if the backend refused it

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError("UserService.save_user() must be implemented by adapter")

    @abstractmethod
    def delete_user(self, user_id: int) -> bool:
        """Delete a user.

        Args:
            user_id: Backend-assigned user identifier

        Returns:
            True if a user was deleted

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError(
            "UserService.delete_user() must be implemented by adapter"
        )

    @abstractmethod
    def get_active_users(self) -> Iterable[User]:
        """List all users whose ``is_active`` flag is set.

        Returns:
            Active users, in a backend-defined order

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError(
            "UserService.get_active_users() must be implemented by adapter"
        )

    @abstractmethod
    def validate_user(self, user: User) -> bool:
        """Apply backend business validation to a user.

        Args:
            user: User about to be persisted

        Returns:
            True if the user is acceptable for persistence

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError(
            "UserService.validate_user() must be implemented by adapter"
        )
