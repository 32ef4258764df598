from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.call import RegisterCallRequest
from app.services.call_service import CallClient, get_call_client, register_call as register_web_call

router = APIRouter(prefix="/api", tags=["Calls"])


@router.post("/register-call")
def register_call(
    payload: RegisterCallRequest,
    db: Session = Depends(get_db),
    client: CallClient = Depends(get_call_client),
):
    """Register a voice call with the interviewer's agent and return the provider payload."""
    response = register_web_call(db, client, payload.interviewer_id, payload.dynamic_data)
    return {"registerCallResponse": response}
