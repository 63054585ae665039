"""Pydantic schemas for task request/response validation."""

from enum import Enum
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Status(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


OPEN_STATUSES = [Status.PENDING.value, Status.IN_PROGRESS.value]


class TaskDraft(BaseModel):
    """In-memory task, not persisted yet.

    An empty title is allowed here: the parser returns one for empty input
    and validation only happens when the draft is committed.
    """

    title: str = ""
    description: str = ""
    due_date: Optional[date] = None
    priority: Priority = Priority.MEDIUM
    status: Status = Status.PENDING

    model_config = ConfigDict(use_enum_values=True)


class SuggestedSubtask(BaseModel):
    """One entry of a suggestion batch. `index` is its identity for selection."""

    index: int
    title: str
    priority: Priority = Priority.MEDIUM

    model_config = ConfigDict(use_enum_values=True)


class TaskUpdate(BaseModel):
    """Schema for updating an existing task."""
    
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = None
    priority: Optional[Priority] = None
    status: Optional[Status] = None

    model_config = ConfigDict(use_enum_values=True)


class TaskFromTextRequest(BaseModel):
    text: str


class TaskResponse(BaseModel):
    """Schema for task responses from API."""
    
    id: int
    user_id: int
    parent_task_id: Optional[int]
    is_subtask: bool
    title: str
    description: Optional[str]
    due_date: Optional[date]
    priority: Priority
    status: Status
    created_at: datetime
    updated_at: datetime
    
    model_config = ConfigDict(from_attributes=True)
