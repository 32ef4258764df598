"""
Popular-topic interview endpoints.

Static paths (/sessions, /stats) are declared before /{interview_id} so they
are not captured as ids. Session bodies are read raw and validated by the
service after the caller's identity is checked.
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from app.api.request_body import json_body_docs, read_json_body
from app.core.auth_dependency import RequestContext, get_request_context
from app.core.result import envelope_response
from app.db.session import get_db
from app.schemas.session import PopularInterviewSessionCreate, InterviewResponseCreate
from app.services.popular_interview_service import (
    get_popular_interviews,
    get_popular_interview_by_id,
    start_popular_interview_session,
    get_popular_interview_session,
    get_user_popular_interview_stats,
    save_interview_response,
)

router = APIRouter(prefix="/api/popular-interviews", tags=["Popular Interviews"])


@router.get("")
def list_popular_interviews(db: Session = Depends(get_db)):
    return envelope_response(get_popular_interviews(db))


@router.post("/sessions", openapi_extra=json_body_docs(PopularInterviewSessionCreate))
async def start_session(request: Request, ctx: RequestContext = Depends(get_request_context)):
    body = await read_json_body(request)
    result = start_popular_interview_session(ctx, body)
    return envelope_response(result, success_status=status.HTTP_201_CREATED)


@router.get("/sessions/{session_id}")
def get_session(session_id: str, ctx: RequestContext = Depends(get_request_context)):
    return envelope_response(get_popular_interview_session(ctx, session_id))


@router.post("/sessions/{session_id}/responses", openapi_extra=json_body_docs(InterviewResponseCreate))
async def add_response(session_id: str, request: Request, ctx: RequestContext = Depends(get_request_context)):
    """Record a question/answer exchange in one of the caller's sessions."""
    body = await read_json_body(request)
    result = save_interview_response(ctx, session_id, body)
    return envelope_response(result, success_status=status.HTTP_201_CREATED)


@router.get("/stats")
def get_stats(ctx: RequestContext = Depends(get_request_context)):
    return envelope_response(get_user_popular_interview_stats(ctx))


@router.get("/{interview_id}")
def get_popular_interview(interview_id: str, db: Session = Depends(get_db)):
    return envelope_response(get_popular_interview_by_id(db, interview_id))
