"""Task model for SQLModel."""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, String, ForeignKey
from datetime import datetime, timezone
import uuid

from task_manager.models.types import UTCTimestamp


class Task(SQLModel, table=True):
    """Task entity owned by exactly one user."""

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True,
    )
    user_id: str = Field(
        sa_column=Column(String, ForeignKey("user.id", ondelete="CASCADE"), index=True, nullable=False)
    )
    title: str = Field(min_length=1)
    description: str
    due_date: datetime = Field(sa_column=Column(UTCTimestamp(), nullable=False))
    status: bool = Field(default=False)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column=Column(UTCTimestamp(), nullable=False),
    )
