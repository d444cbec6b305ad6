"""User controller - input guards and orchestration over a UserService."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime

from user_management.models import User
from user_management.services.user_service import UserService

UNKNOWN_USER_DISPLAY_NAME = "Unknown User"


def is_blank(value: str | None) -> bool:
    """Return True for None, empty or whitespace-only strings."""
    return value is None or not value.strip()


class UserController:
    """Mediates between callers and a user storage service.

    The controller rejects blank input before touching the service and
    otherwise passes service results (and exceptions) straight through.
    It keeps no state besides the service reference.
    """

    def __init__(self, user_service: UserService):
        """Initialize the controller.

        Args:
            user_service: UserService implementation for data access

        Raises:
            ValueError: If user_service is None
        """
        if user_service is None:
            raise ValueError("user_service must not be None")
        self.user_service = user_service

    def get_user_display_name(self, user_id: int) -> str:
        """Return the user's name, or "Unknown User" if there is none."""
        user = self.user_service.get_user(user_id)
        if user is None or user.name is None:
            return UNKNOWN_USER_DISPLAY_NAME
        return user.name

    def create_user(self, name: str | None, email: str | None) -> bool:
        """Create a new active user.

        Args:
            name: User name (required, non-blank)
            email: Email address (required, non-blank)

        Returns:
            False if input is blank or the service rejects the user,
            otherwise the result of saving it
        """
        if is_blank(name) or is_blank(email):
            return False

        user = User(
            name=name,
            email=email,
            created_date=datetime.now(UTC),
            is_active=True,
        )

        if not self.user_service.validate_user(user):
            return False

        return self.user_service.save_user(user)

    def update_user(self, user: User | None) -> bool:
        """Validate and save a caller-supplied user as is."""
        if user is None or is_blank(user.name):
            return False

        if not self.user_service.validate_user(user):
            return False

        return self.user_service.save_user(user)

    def deactivate_user(self, user_id: int) -> bool:
        """Clear the user's active flag and save it.

        Returns:
            False if the user does not exist, otherwise the result of saving
        """
        user = self.user_service.get_user(user_id)
        if user is None:
            return False

        user.is_active = False
        return self.user_service.save_user(user)

    def get_active_user_names(self) -> Iterator[str]:
        """Return the names of active users in the service's order.

        The service is queried once per call, when the method is invoked;
        names are projected lazily as the result is iterated.
        """
        return (user.name for user in self.user_service.get_active_users())

    def find_user_by_email(self, email: str | None) -> User | None:
        """Look up a user by email; blank input returns None."""
        if is_blank(email):
            return None

        return self.user_service.get_user_by_email(email)
