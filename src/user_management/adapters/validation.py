"""Business validation shared by the bundled storage backends."""

from __future__ import annotations

from user_management.models import User


def is_valid_email(email: str | None) -> bool:
    """Check that an email has exactly one "@" with text on both sides.

    Args:
        email: Email address to check

    Returns:
        True if the address has a non-empty local part and domain
    """
    if email is None:
        return False
    local, sep, domain = email.strip().partition("@")
    return bool(sep) and bool(local) and bool(domain) and "@" not in domain


def is_valid_user(user: User) -> bool:
    """Check that a user has a non-blank name and a plausible email."""
    if user.name is None or not user.name.strip():
        return False
    return is_valid_email(user.email)
