from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from app.api.request_body import json_body_docs, read_json_body
from app.core.auth_dependency import RequestContext, get_request_context
from app.core.result import envelope_response
from app.db.session import get_db
from app.schemas.session import BehavioralInterviewSessionCreate
from app.services.behavioral_interview_service import (
    get_behavioral_interviews,
    get_behavioral_interview_by_id,
    start_behavioral_interview_session,
    get_behavioral_interview_session,
    get_user_behavioral_interview_stats,
)

router = APIRouter(prefix="/api/behavioral-interviews", tags=["Behavioral Interviews"])


@router.get("")
def list_behavioral_interviews(db: Session = Depends(get_db)):
    return envelope_response(get_behavioral_interviews(db))


@router.post("/sessions", openapi_extra=json_body_docs(BehavioralInterviewSessionCreate))
async def start_session(request: Request, ctx: RequestContext = Depends(get_request_context)):
    body = await read_json_body(request)
    result = start_behavioral_interview_session(ctx, body)
    return envelope_response(result, success_status=status.HTTP_201_CREATED)


@router.get("/sessions/{session_id}")
def get_session(session_id: str, ctx: RequestContext = Depends(get_request_context)):
    return envelope_response(get_behavioral_interview_session(ctx, session_id))


@router.get("/stats")
def get_stats(ctx: RequestContext = Depends(get_request_context)):
    return envelope_response(get_user_behavioral_interview_stats(ctx))


@router.get("/{interview_id}")
def get_behavioral_interview(interview_id: str, db: Session = Depends(get_db)):
    return envelope_response(get_behavioral_interview_by_id(db, interview_id))
