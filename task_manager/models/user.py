"""User model for SQLModel."""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column
from datetime import datetime, timezone
import uuid

from task_manager.models.types import UTCTimestamp


class User(SQLModel, table=True):
    """User entity for authentication and task ownership."""

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True,
        index=True
    )
    # Uniqueness is enforced by the index, registration relies on it
    username: str = Field(unique=True, index=True, min_length=1, max_length=255)
    password_hash: str = Field(max_length=255)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column=Column(UTCTimestamp(), nullable=False),
    )
