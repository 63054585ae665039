"""
Router du formulaire "nouvelle tâche" assisté.

Endpoints:
- POST /intake/parse - texte libre -> brouillon
- POST /intake/suggestions - suggestions de subtasks pour un titre
- POST /intake/commit - écrit la tâche + les subtasks cochées
"""

from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from taskpilot.core.errors import ValidationError, WriteFailure
from taskpilot.models.user import User
from taskpilot.routers.deps import get_current_user, get_orchestrator
from taskpilot.schemas.intake import ParseTextRequest, SuggestRequest, CommitRequest, CommitResponse
from taskpilot.schemas.task import TaskDraft, SuggestedSubtask
from taskpilot.services.intake_service import TaskIntakeOrchestrator

router = APIRouter(prefix="/intake", tags=["intake"])


@router.post("/parse", response_model=TaskDraft)
def parse_text(
    request: ParseTextRequest,
    current_user: User = Depends(get_current_user),
    orchestrator: TaskIntakeOrchestrator = Depends(get_orchestrator)
):
    parsed = orchestrator.apply_parsed_draft(request.text)
    if request.form is None:
        return parsed
    return orchestrator.merge_parsed_draft(request.form, parsed)


@router.post("/suggestions", response_model=List[SuggestedSubtask])
async def suggest(
    request: SuggestRequest,
    current_user: User = Depends(get_current_user),
    orchestrator: TaskIntakeOrchestrator = Depends(get_orchestrator)
):
    try:
        return await orchestrator.request_suggestions(request.title, request.description, current_user.id)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/commit", response_model=CommitResponse, status_code=status.HTTP_201_CREATED)
def commit(
    request: CommitRequest,
    current_user: User = Depends(get_current_user),
    orchestrator: TaskIntakeOrchestrator = Depends(get_orchestrator)
):
    try:
        task_id, subtask_ids = orchestrator.commit(
            request.draft,
            current_user.id,
            selected=request.selected,
            suggestions=request.suggestions
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except WriteFailure:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create task")
    
    return CommitResponse(task_id=task_id, subtask_ids=subtask_ids)
