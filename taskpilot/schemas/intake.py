"""Schemas for the free-text intake / subtask suggestion workflow."""

from typing import Optional, List

from pydantic import BaseModel, Field

from taskpilot.schemas.task import TaskDraft, SuggestedSubtask


class ParseTextRequest(BaseModel):
    text: str
    # formulaire en cours d'édition; description et status sont conservés
    form: Optional[TaskDraft] = None


class SuggestRequest(BaseModel):
    title: str
    description: Optional[str] = None


class CommitRequest(BaseModel):
    draft: TaskDraft
    suggestions: List[SuggestedSubtask] = Field(default_factory=list)
    selected: List[int] = Field(default_factory=list)  # index des suggestions cochées


class CommitResponse(BaseModel):
    task_id: int
    subtask_ids: List[int]
