"""
Workflow de création d'une tâche:
texte libre -> brouillon -> suggestions (optionnel) -> écriture tâche + subtasks.
"""

import logging
from datetime import date
from typing import Callable, Collection, List, Optional, Sequence, Tuple

from taskpilot.core.errors import ValidationError, WriteFailure
from taskpilot.schemas.task import TaskDraft, SuggestedSubtask, Priority, Status
from taskpilot.services import intake_parser
from taskpilot.services.suggestion_service import SuggestionEngine, default_engine
from taskpilot.services.task_store import TaskStore

logger = logging.getLogger(__name__)

# champs qu'un parse écrase dans le formulaire
PARSED_FIELDS = ("title", "due_date", "priority")


class TaskIntakeOrchestrator:

    def __init__(
        self,
        store: TaskStore,
        engine: Optional[SuggestionEngine] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        self.store = store
        self.engine = engine or default_engine
        self.today = today or date.today

    def apply_parsed_draft(self, raw_text: str) -> TaskDraft:
        return intake_parser.parse(raw_text, today=self.today())

    @staticmethod
    def merge_parsed_draft(form: TaskDraft, parsed: TaskDraft) -> TaskDraft:
        """Copy of `form` with only title, due date and priority taken from `parsed`."""
        return form.model_copy(update={f: getattr(parsed, f) for f in PARSED_FIELDS})

    async def request_suggestions(
        self,
        form_title: str,
        form_description: Optional[str] = None,
        owner_id: Optional[int] = None,
    ) -> List[SuggestedSubtask]:
        if not form_title or not form_title.strip():
            raise ValidationError("Please enter a task title first")
        # l'appelant pré-coche toutes les suggestions
        return await self.engine.suggest(form_title, form_description, owner_id)

    def commit(
        self,
        draft: TaskDraft,
        owner_id: Optional[int],
        selected: Collection[int],
        suggestions: Sequence[SuggestedSubtask],
    ) -> Tuple[int, List[int]]:
        """Write the primary task, then each selected suggestion as a subtask.

        Subtasks are written one by one in suggestion order. A failed subtask
        is logged and skipped; a failed primary write raises WriteFailure and
        nothing else is attempted. There is no rollback of the primary task.
        """
        if not draft.title or not draft.title.strip():
            raise ValidationError("Task title is required")
        if owner_id is None:
            raise ValidationError("You must be logged in to create a task")
        indexes = [s.index for s in suggestions]
        if len(indexes) != len(set(indexes)):
            raise ValidationError("Suggestion indexes must be unique")

        primary_id = self.store.insert({
            "user_id": owner_id,
            "parent_task_id": None,
            "is_subtask": False,
            "title": draft.title,
            "description": draft.description or "",
            "due_date": draft.due_date,
            "priority": Priority(draft.priority).value,
            "status": Status(draft.status).value,
        })

        selected = set(selected)
        chosen = [s for s in suggestions if s.index in selected]
        subtask_ids = []
        for suggestion in chosen:
            try:
                subtask_ids.append(self.store.insert({
                    "user_id": owner_id,
                    "parent_task_id": primary_id,
                    "is_subtask": True,
                    "title": suggestion.title,
                    "description": "",
                    "due_date": None,
                    "priority": Priority(suggestion.priority or Priority.MEDIUM).value,
                    "status": Status.PENDING.value,
                }))
            except WriteFailure as e:
                logger.warning(f"Subtask {suggestion.title!r} skipped for task {primary_id}: {e}")

        logger.info(
            f"Task {primary_id} created for user {owner_id} "
            f"with {len(subtask_ids)}/{len(chosen)} subtasks"
        )
        return primary_id, subtask_ids
