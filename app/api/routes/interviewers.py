from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.result import envelope_response
from app.db.session import get_db
from app.services.interviewer_service import get_interviewers, get_interviewer_by_id

router = APIRouter(prefix="/api/interviewers", tags=["Interviewers"])


@router.get("")
def list_interviewers(db: Session = Depends(get_db)):
    return envelope_response(get_interviewers(db))


@router.get("/{interviewer_id}")
def get_interviewer(interviewer_id: str, db: Session = Depends(get_db)):
    return envelope_response(get_interviewer_by_id(db, interviewer_id))
