"""Task store: the only place that writes tasks to the database."""

import logging
from datetime import datetime
from typing import Any, Dict, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from taskpilot.core.errors import WriteFailure
from taskpilot.models.task import Task

logger = logging.getLogger(__name__)


class TaskStore(Protocol):
    def insert(self, record: Dict[str, Any]) -> int:
        ...


class SqlAlchemyTaskStore:
    """Insert-only store backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def insert(self, record: Dict[str, Any]) -> int:
        now = datetime.utcnow()
        task = Task(**record, created_at=now, updated_at=now)
        try:
            self.db.add(task)
            self.db.commit()
            self.db.refresh(task)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Insert failed for task {record.get('title')!r}: {e}")
            raise WriteFailure(str(e)) from e
        return task.id
