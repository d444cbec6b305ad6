"""In-memory implementation of UserService."""

from __future__ import annotations

from user_management.adapters.validation import is_valid_user
from user_management.models import User
from user_management.services.user_service import UserService


class InMemoryUserService(UserService):
    """Dictionary-backed user storage.

    Stored records are copies: users handed out by lookups can be mutated by
    the caller without affecting storage until they are saved back.
    """

    def __init__(self, users: list[User] | None = None):
        """Initialize the in-memory store.

        Args:
            users: Optional new users (without IDs) to seed the store with
        """
        self._users: dict[int, User] = {}
        self._next_id = 1
        for user in users or []:
            self.save_user(user)

    def _email_taken(self, email: str | None, exclude_id: int | None) -> bool:
        if email is None:
            return False
        needle = email.lower()
        return any(
            stored.email is not None
            and stored.email.lower() == needle
            and stored.id != exclude_id
            for stored in self._users.values()
        )

    def get_user(self, user_id: int) -> User | None:
        """Get a user by ID."""
        user = self._users.get(user_id)
        return user.model_copy() if user is not None else None

    def get_user_by_email(self, email: str) -> User | None:
        """Get a user by email (case-insensitive)."""
        needle = email.lower()
        for user in self._users.values():
            if user.email is not None and user.email.lower() == needle:
                return user.model_copy()
        return None

    def save_user(self, user: User) -> bool:
        """Create or update a user.

        Returns False when updating an unknown ID or when the email belongs
        to another user.
        """
        if user.id is not None and user.id not in self._users:
            return False
        if self._email_taken(user.email, user.id):
            return False

        if user.id is None:
            user.id = self._next_id
            self._next_id += 1

        self._users[user.id] = user.model_copy()
        return True

    def delete_user(self, user_id: int) -> bool:
        """Delete a user."""
        return self._users.pop(user_id, None) is not None

    def get_active_users(self) -> list[User]:
        """List active users ordered by ID."""
        return [
            self._users[user_id].model_copy()
            for user_id in sorted(self._users)
            if self._users[user_id].is_active
        ]

    def validate_user(self, user: User) -> bool:
        """Require a non-blank name and a plausible email."""
        return is_valid_user(user)
