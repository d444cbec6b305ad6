"""Controllers for user management - input guards over the service layer."""

from .user_controller import UNKNOWN_USER_DISPLAY_NAME, UserController, is_blank

__all__ = [
    "UserController",
    "UNKNOWN_USER_DISPLAY_NAME",
    "is_blank",
]
