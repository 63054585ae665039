from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from taskpilot.core.database import get_db
from taskpilot.core.errors import ValidationError, WriteFailure
from taskpilot.models.user import User
from taskpilot.models.task import Task
from taskpilot.routers.deps import get_current_user, get_orchestrator
from taskpilot.schemas.task import TaskDraft, TaskUpdate, TaskResponse, TaskFromTextRequest, Status
from taskpilot.services.intake_service import TaskIntakeOrchestrator
from taskpilot.services.task_service import list_tasks, get_recent_tasks, get_user_task, delete_task_tree

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _create(orchestrator: TaskIntakeOrchestrator, draft: TaskDraft, user: User, db: Session) -> Task:
    try:
        task_id, _ = orchestrator.commit(draft, user.id, selected=[], suggestions=[])
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except WriteFailure:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create task")
    return get_user_task(db, user.id, task_id)


def _get_or_404(db: Session, user: User, task_id: int) -> Task:
    task = get_user_task(db, user.id, task_id)
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    draft: TaskDraft,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    orchestrator: TaskIntakeOrchestrator = Depends(get_orchestrator)
):
    return _create(orchestrator, draft, current_user, db)


@router.post("/from-text", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task_from_text(
    request: TaskFromTextRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    orchestrator: TaskIntakeOrchestrator = Depends(get_orchestrator)
):
    """Crée une tâche directement depuis du texte libre.

    - titre: texte avant " by "
    - échéance: tomorrow / next week / today après " by "
    - priorité: détectée selon les mots-clés
    """
    draft = orchestrator.apply_parsed_draft(request.text)
    return _create(orchestrator, draft, current_user, db)


@router.get("", response_model=List[TaskResponse])
def get_tasks(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    status_filter: Optional[Status] = Query(None),
    parent_id: Optional[int] = Query(None)
):
    return list_tasks(
        db,
        current_user.id,
        status=status_filter.value if status_filter else None,
        parent_id=parent_id
    )


@router.get("/recent", response_model=List[TaskResponse])
def recent(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return get_recent_tasks(db, current_user.id)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return _get_or_404(db, current_user, task_id)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: int,
    task_data: TaskUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    task = _get_or_404(db, current_user, task_id)
    
    update_data = task_data.model_dump(exclude_unset=True)
    if "title" in update_data and not (update_data["title"] or "").strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Task title is required")
    for field in ("priority", "status"):
        # null explicite = on garde la valeur actuelle
        if field in update_data and update_data[field] is None:
            del update_data[field]
    
    for field, value in update_data.items():
        setattr(task, field, value)
    
    db.commit()
    db.refresh(task)
    return task


@router.post("/{task_id}/complete", response_model=TaskResponse)
def complete_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    task = _get_or_404(db, current_user, task_id)
    task.status = Status.COMPLETED.value
    db.commit()
    db.refresh(task)
    return task


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    task = _get_or_404(db, current_user, task_id)
    delete_task_tree(db, task)
    logger.info(f"Task {task_id} deleted by user {current_user.id}")
