"""Task schemas for the Task Manager API.

Clients use camelCase (``dueDate``, ``userId``); the models accept the
snake_case field names too.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from typing import List

from task_manager.models.types import as_utc


class TaskCreate(BaseModel):
    """Schema for creating a task."""
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1)
    description: str
    due_date: datetime = Field(..., alias="dueDate")

    @field_validator("due_date")
    @classmethod
    def normalise_due_date(cls, value: datetime) -> datetime:
        """Naive timestamps are taken as UTC."""
        return as_utc(value)


class TaskUpdate(BaseModel):
    """Schema for replacing a task. Every field is required."""
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1)
    description: str
    due_date: datetime = Field(..., alias="dueDate")
    status: bool

    @field_validator("due_date")
    @classmethod
    def normalise_due_date(cls, value: datetime) -> datetime:
        return as_utc(value)


class TaskResponse(BaseModel):
    """Schema for a task in API responses."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    title: str
    description: str
    due_date: datetime = Field(alias="dueDate")
    status: bool
    user_id: str = Field(alias="userId")


class TaskEnvelope(BaseModel):
    task: TaskResponse


class TaskListResponse(BaseModel):
    tasks: List[TaskResponse]
