"""Storage backends implementing the UserService contract.

- user_management.adapters.memory (in-process dictionary)
- user_management.adapters.sqlite (local SQLite file)
"""

from .memory import InMemoryUserService
from .sqlite import SqliteUserService

__all__ = [
    "InMemoryUserService",
    "SqliteUserService",
]
