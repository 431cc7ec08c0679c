"""
Task schemas
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import Field, field_validator

from .base import CamelModel


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


def _to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class TaskCreate(CamelModel):
    """Create a task; the assignee is chosen by the server"""
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    due_date: Optional[datetime] = None

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _to_naive_utc(v)


class TaskUpdate(CamelModel):
    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[datetime] = None

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _to_naive_utc(v)


class TaskResponse(CamelModel):
    id: str
    title: str
    description: str
    department_id: str
    assigned_to: str = Field(validation_alias="assigned_to_id", serialization_alias="assignedTo")
    status: str
    due_date: datetime
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
