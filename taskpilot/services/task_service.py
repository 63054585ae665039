"""Task service"""

from sqlalchemy.orm import Session
from typing import List, Optional
from taskpilot.core.config import settings
from taskpilot.models.task import Task
from taskpilot.schemas.task import OPEN_STATUSES


def _by_due_date(query):
    # sans échéance en dernier
    return query.order_by(Task.due_date.is_(None), Task.due_date.asc(), Task.created_at.desc())


def list_tasks(
    db: Session,
    user_id: int,
    status: Optional[str] = None,
    parent_id: Optional[int] = None
) -> List[Task]:
    query = db.query(Task).filter(Task.user_id == user_id)
    if status:
        query = query.filter(Task.status == status)
    if parent_id is not None:
        query = query.filter(Task.parent_task_id == parent_id)
    return _by_due_date(query).all()


def get_recent_tasks(db: Session, user_id: int, limit: Optional[int] = None) -> List[Task]:
    """Tâches ouvertes (pending / in-progress) les plus proches de l'échéance."""
    query = db.query(Task).filter(
        Task.user_id == user_id,
        Task.status.in_(OPEN_STATUSES)
    )
    return _by_due_date(query).limit(limit or settings.RECENT_TASKS_LIMIT).all()


def get_user_task(db: Session, user_id: int, task_id: int) -> Optional[Task]:
    return db.query(Task).filter(
        Task.id == task_id,
        Task.user_id == user_id
    ).first()


def delete_task_tree(db: Session, task: Task) -> None:
    """Supprime la tâche et ses subtasks."""
    db.query(Task).filter(
        Task.parent_task_id == task.id,
        Task.user_id == task.user_id
    ).delete(synchronize_session=False)
    db.delete(task)
    db.commit()
