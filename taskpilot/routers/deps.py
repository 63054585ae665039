from fastapi import Depends, HTTPException, status, Header
from sqlalchemy.orm import Session
from typing import Optional

from taskpilot.core.database import get_db
from taskpilot.core.security import decode_token
from taskpilot.models.user import User
from taskpilot.services.intake_service import TaskIntakeOrchestrator
from taskpilot.services.task_store import SqlAlchemyTaskStore


def get_current_user(
    db: Session = Depends(get_db),
    authorization: Optional[str] = Header(None)
) -> User:
    # Check token
    if not authorization:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing token")
    
    token = authorization.replace("Bearer ", "")
    user_id = decode_token(token)
    
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    
    return user


def get_orchestrator(db: Session = Depends(get_db)) -> TaskIntakeOrchestrator:
    return TaskIntakeOrchestrator(store=SqlAlchemyTaskStore(db))
