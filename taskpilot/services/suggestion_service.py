"""
Rule-based subtask suggestions.

Stands in for a real model: the task title is matched against keyword
categories, first match wins, and the category's fixed list is returned.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple, Union

from taskpilot.schemas.task import SuggestedSubtask, Priority

logger = logging.getLogger(__name__)

Template = Tuple[str, Priority]
Templates = Union[List[Template], Callable[[str], List[Template]]]


REPORT_STEPS = [
    ("Gather data for report", Priority.HIGH),
    ("Create outline for report", Priority.MEDIUM),
    ("Write first draft", Priority.MEDIUM),
    ("Review and revise report", Priority.MEDIUM),
    ("Format final document", Priority.LOW),
]

PROJECT_STEPS = [
    ("Define project scope", Priority.HIGH),
    ("Create project timeline", Priority.HIGH),
    ("Assign team responsibilities", Priority.MEDIUM),
    ("Set up project tracking", Priority.MEDIUM),
    ("Schedule project meetings", Priority.LOW),
]

PRESENTATION_STEPS = [
    ("Outline presentation structure", Priority.HIGH),
    ("Create slides", Priority.MEDIUM),
    ("Add speaking notes", Priority.MEDIUM),
    ("Practice delivery", Priority.HIGH),
    ("Prepare for Q&A", Priority.MEDIUM),
]

PLANNING_STEPS = [
    ("Brainstorm ideas", Priority.MEDIUM),
    ("Create initial plan", Priority.HIGH),
    ("Gather resources", Priority.MEDIUM),
    ("Implement plan", Priority.HIGH),
    ("Review and adjust", Priority.MEDIUM),
]


def generic_steps(title: str) -> List[Template]:
    return [
        (f'Research for "{title}"', Priority.MEDIUM),
        (f'Plan approach for "{title}"', Priority.HIGH),
        (f'Execute "{title}"', Priority.HIGH),
        (f'Review and finalize "{title}"', Priority.MEDIUM),
    ]


# (mots-clés, étapes) évalués dans l'ordre; liste de mots-clés vide = fallback
DEFAULT_RULES: List[Tuple[Sequence[str], Templates]] = [
    (("report",), REPORT_STEPS),
    (("project",), PROJECT_STEPS),
    (("presentation",), PRESENTATION_STEPS),
    (("plan", "organize"), PLANNING_STEPS),
    ((), generic_steps),
]


class SuggestionEngine:

    def __init__(self, rules: Optional[List[Tuple[Sequence[str], Templates]]] = None):
        self.rules = rules if rules is not None else DEFAULT_RULES

    def _match(self, title: str) -> List[Template]:
        title_lower = title.lower()
        for keywords, templates in self.rules:
            if keywords and not any(k in title_lower for k in keywords):
                continue
            return templates(title) if callable(templates) else list(templates)
        return []

    async def suggest(
        self,
        title: str,
        description: Optional[str] = None,
        owner_id: Optional[int] = None,
    ) -> List[SuggestedSubtask]:
        """Return the suggestion batch for a task title.

        Coroutine so a remote backend can replace the rules without changing
        callers. `description` and `owner_id` are accepted but not used by
        the keyword rules.
        """
        templates = self._match(title)
        logger.debug("suggest title=%r -> %d suggestions", title, len(templates))
        return [
            SuggestedSubtask(index=i, title=step_title, priority=priority)
            for i, (step_title, priority) in enumerate(templates)
        ]


default_engine = SuggestionEngine()


async def suggest_subtasks(
    title: str,
    description: Optional[str] = None,
    owner_id: Optional[int] = None,
) -> List[SuggestedSubtask]:
    return await default_engine.suggest(title, description, owner_id)
