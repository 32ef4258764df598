"""
Popular-topic interviews: catalog reads, practice sessions, recorded responses
and per-user stats.
"""
import logging
from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.auth_dependency import AuthedContext
from app.core.errors import ValidationFailureError
from app.core.procedures import authorized
from app.core.result import Ok, Err, Result, NOT_FOUND, FETCH_FAILED, CREATE_FAILED
from app.core.view_cache import DASHBOARD_PATH
from app.db.models.interviewer import Interviewer
from app.db.models.popular_interview import PopularInterview
from app.db.models.interview_session import PopularInterviewSession, InterviewResponse
from app.schemas.catalog import PopularInterviewResponse
from app.schemas.base import validate_body
from app.schemas.session import (
    PopularInterviewSessionCreate,
    PopularInterviewSessionResponse,
    PopularInterviewStat,
    InterviewResponseCreate,
    InterviewResponseResponse,
)
from app.services.catalog import list_active, get_active, count_sessions_by_entity

logger = logging.getLogger(__name__)


def get_popular_interviews(db: Session) -> Result[List[PopularInterviewResponse]]:
    """Active popular interviews ordered by category, then title."""
    try:
        interviews = list_active(
            db, PopularInterview, order_by=[PopularInterview.category, PopularInterview.title]
        )
        return Ok([PopularInterviewResponse.model_validate(i) for i in interviews])
    except SQLAlchemyError as e:
        logger.error(f"Error fetching popular interviews: {e}", exc_info=True)
        return Err("Failed to fetch popular interviews", FETCH_FAILED)


def get_popular_interview_by_id(db: Session, interview_id: str) -> Result[PopularInterviewResponse]:
    try:
        interview = get_active(db, PopularInterview, interview_id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching popular interview {interview_id}: {e}", exc_info=True)
        return Err("Failed to fetch interview details", FETCH_FAILED)

    if not interview:
        return Err("Interview not found", NOT_FOUND)
    return Ok(PopularInterviewResponse.model_validate(interview))


def validate_session_config(question_count: int, duration: int) -> None:
    """Reject non-positive session settings before touching the database."""
    if question_count is None or question_count < 1:
        raise ValidationFailureError("questionCount must be a positive integer")
    if duration is None or duration < 1:
        raise ValidationFailureError("duration must be a positive integer")


@authorized
def create_popular_interview_session(
    ctx: AuthedContext,
    popular_interview_id: str,
    question_count: int,
    duration: int,
    interviewer_id: Optional[str] = None,
) -> Result[PopularInterviewSessionResponse]:
    """
    Start a practice session on an active popular interview.

    The parent lookups and the insert share one transaction: the rows are
    locked where the backend supports it, and a NOT_FOUND leaves nothing
    behind. Retried calls create additional sessions.
    """
    validate_session_config(question_count, duration)
    db = ctx.db

    try:
        popular_interview = get_active(db, PopularInterview, popular_interview_id, for_update=True)
        if not popular_interview:
            db.rollback()
            logger.info(f"Session rejected, interview not found: popular_interview_id={popular_interview_id}")
            return Err("Interview not found", NOT_FOUND)

        if interviewer_id and not get_active(db, Interviewer, interviewer_id, for_update=True):
            db.rollback()
            logger.info(f"Session rejected, interviewer not found: interviewer_id={interviewer_id}")
            return Err("Interviewer not found", NOT_FOUND)

        session = PopularInterviewSession(
            user_id=ctx.user.id,
            popular_interview_id=popular_interview.id,
            interviewer_id=interviewer_id or None,
            question_count=question_count,
            duration=duration,
            start_time=datetime.utcnow(),
        )
        db.add(session)
        db.commit()
        db.refresh(session)
        response = PopularInterviewSessionResponse.model_validate(session)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating popular interview session: {e}", exc_info=True)
        return Err("Failed to start interview session", CREATE_FAILED)

    if ctx.views is not None:
        ctx.views.invalidate(DASHBOARD_PATH)

    logger.info(
        f"Popular interview session created: session_id={session.id}, user_id={ctx.user.id}, "
        f"popular_interview_id={popular_interview_id}"
    )
    return Ok(response)


@authorized
def start_popular_interview_session(ctx: AuthedContext, body: Any) -> Result[PopularInterviewSessionResponse]:
    """Validate a raw session request behind the identity check, then start the session."""
    payload = validate_body(PopularInterviewSessionCreate, body)
    return create_popular_interview_session(
        ctx,
        popular_interview_id=payload.popular_interview_id,
        question_count=payload.question_count,
        duration=payload.duration,
        interviewer_id=payload.interviewer_id,
    )


@authorized
def get_popular_interview_session(ctx: AuthedContext, session_id: str) -> Result[PopularInterviewSessionResponse]:
    """One of the caller's own sessions; other users' sessions are NOT_FOUND."""
    try:
        session = ctx.db.query(PopularInterviewSession).filter(
            PopularInterviewSession.id == session_id,
            PopularInterviewSession.user_id == ctx.user.id,
        ).first()
        if not session:
            return Err("Session not found", NOT_FOUND)
        return Ok(PopularInterviewSessionResponse.model_validate(session))
    except SQLAlchemyError as e:
        logger.error(f"Error fetching interview session {session_id}: {e}", exc_info=True)
        return Err("Failed to fetch session", FETCH_FAILED)


@authorized
def get_user_popular_interview_stats(ctx: AuthedContext) -> Result[List[PopularInterviewStat]]:
    """Session counts per popular interview for the caller only."""
    try:
        rows = count_sessions_by_entity(
            ctx.db,
            PopularInterviewSession,
            PopularInterviewSession.popular_interview_id,
            ctx.user.id,
        )
        return Ok([
            PopularInterviewStat(popular_interview_id=entity_id, count=count)
            for entity_id, count in rows
        ])
    except SQLAlchemyError as e:
        logger.error(f"Error fetching popular interview stats: {e}", exc_info=True)
        return Err("Failed to fetch stats", FETCH_FAILED)


@authorized
def save_interview_response(ctx: AuthedContext, session_id: str, body: Any) -> Result[InterviewResponseResponse]:
    """
    Record one question/answer exchange in one of the caller's sessions.

    Sessions owned by other users are reported as NOT_FOUND.
    """
    payload = validate_body(InterviewResponseCreate, body)
    db = ctx.db
    try:
        session = db.query(PopularInterviewSession).filter(
            PopularInterviewSession.id == session_id,
            PopularInterviewSession.user_id == ctx.user.id,
        ).first()
        if not session:
            return Err("Session not found", NOT_FOUND)

        response = InterviewResponse(
            session_id=session.id,
            question_text=payload.question_text,
            user_response=payload.user_response,
            ai_response=payload.ai_response,
            response_time=payload.response_time,
        )
        db.add(response)
        db.commit()
        db.refresh(response)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error saving interview response for session {session_id}: {e}", exc_info=True)
        return Err("Failed to save response", CREATE_FAILED)

    logger.info(f"Interview response saved: session_id={session_id}, response_id={response.id}")
    return Ok(InterviewResponseResponse.model_validate(response))
