"""User data models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """User account record.

    The storage backend assigns ``id`` on first save. Instances are mutable so
    a looked-up user can be changed locally and handed back to the backend.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int | None = None
    name: str | None = None
    email: str | None = None
    created_date: datetime | None = None
    is_active: bool = True
