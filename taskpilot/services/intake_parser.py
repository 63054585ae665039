"""
Parse une phrase libre en brouillon de tâche (titre, échéance, priorité).

Pas de vrai NLP: quelques mots-clés anglais, évalués dans un ordre fixe.
"""

import re
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from taskpilot.schemas.task import TaskDraft, Priority

DATE_SEPARATOR = re.compile(r" by ", re.IGNORECASE)

# premier mot-clé trouvé dans la clause de date gagne
DATE_KEYWORDS = [
    ("tomorrow", relativedelta(days=+1)),
    ("next week", relativedelta(weeks=+1)),
    ("today", relativedelta()),
]

HIGH_PRIORITY_WORDS = ["urgent", "important", "critical"]
LOW_PRIORITY_WORDS = ["low priority", "when time permits"]


def split_date_clause(text: str) -> tuple[str, Optional[str]]:
    """Coupe sur la première occurrence de " by " (casse ignorée)."""
    # recherche sur le texte original: lower() peut changer la longueur
    match = DATE_SEPARATOR.search(text)
    if match is None:
        return text.strip(), None
    return text[:match.start()].strip(), text[match.end():]


def resolve_due_date(clause: Optional[str], today: date) -> Optional[date]:
    if not clause:
        return None
    clause = clause.lower()
    for keyword, delta in DATE_KEYWORDS:
        if keyword in clause:
            return today + delta
    # clause non reconnue: ignorée, pas recollée au titre
    return None


def detect_priority(text: str) -> Priority:
    text_lower = text.lower()
    if any(w in text_lower for w in HIGH_PRIORITY_WORDS):
        return Priority.HIGH
    if any(w in text_lower for w in LOW_PRIORITY_WORDS):
        return Priority.LOW
    return Priority.MEDIUM


def parse(text: str, today: Optional[date] = None) -> TaskDraft:
    """Build a draft from free text. Never raises.

    Only title, due_date and priority are filled; description stays empty
    and status keeps the draft default. An empty input gives an empty title,
    callers validate before persisting.
    """
    today = today or date.today()
    title, clause = split_date_clause(text)

    return TaskDraft(
        title=title,
        description="",
        due_date=resolve_due_date(clause, today),
        priority=detect_priority(text),
    )
