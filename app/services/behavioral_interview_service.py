"""
Behavioral interviews: catalog reads, practice sessions and per-user stats.
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
from app.db.models.enums import ExperienceLevel
from app.db.models.interviewer import Interviewer
from app.db.models.behavioral_interview import BehavioralInterview
from app.db.models.interview_session import BehavioralInterviewSession
from app.schemas.catalog import BehavioralInterviewResponse
from app.schemas.base import validate_body
from app.schemas.session import (
    BehavioralInterviewSessionCreate,
    BehavioralInterviewSessionResponse,
    BehavioralInterviewStat,
)
from app.services.catalog import list_active, get_active, count_sessions_by_entity
from app.services.popular_interview_service import validate_session_config

logger = logging.getLogger(__name__)


def get_behavioral_interviews(db: Session) -> Result[List[BehavioralInterviewResponse]]:
    """Active behavioral interviews ordered by category, company, then title."""
    try:
        interviews = list_active(
            db,
            BehavioralInterview,
            order_by=[BehavioralInterview.category, BehavioralInterview.company, BehavioralInterview.title],
        )
        return Ok([BehavioralInterviewResponse.model_validate(i) for i in interviews])
    except SQLAlchemyError as e:
        logger.error(f"Error fetching behavioral interviews: {e}", exc_info=True)
        return Err("Failed to fetch behavioral interviews", FETCH_FAILED)


def get_behavioral_interview_by_id(db: Session, interview_id: str) -> Result[BehavioralInterviewResponse]:
    try:
        interview = get_active(db, BehavioralInterview, interview_id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching behavioral interview {interview_id}: {e}", exc_info=True)
        return Err("Failed to fetch interview details", FETCH_FAILED)

    if not interview:
        return Err("Interview not found", NOT_FOUND)
    return Ok(BehavioralInterviewResponse.model_validate(interview))


def parse_experience_level(value) -> ExperienceLevel:
    if isinstance(value, ExperienceLevel):
        return value
    try:
        return ExperienceLevel(str(value).strip().upper())
    except ValueError:
        allowed = ", ".join(level.value for level in ExperienceLevel)
        raise ValidationFailureError(f"Invalid experience level: {value!r} (expected one of {allowed})")


@authorized
def create_behavioral_interview_session(
    ctx: AuthedContext,
    behavioral_interview_id: str,
    question_count: int,
    duration: int,
    experience_level,
    target_role: str,
    interviewer_id: Optional[str] = None,
    questions: Optional[List[str]] = None,
) -> Result[BehavioralInterviewSessionResponse]:
    """
    Start a behavioral practice session, optionally storing pre-generated questions.

    Same transactional contract as popular interview sessions.
    """
    validate_session_config(question_count, duration)
    level = parse_experience_level(experience_level)
    if not target_role or not target_role.strip():
        raise ValidationFailureError("targetRole is required")

    db = ctx.db
    try:
        behavioral_interview = get_active(db, BehavioralInterview, behavioral_interview_id, for_update=True)
        if not behavioral_interview:
            db.rollback()
            return Err("Interview not found", NOT_FOUND)

        if interviewer_id and not get_active(db, Interviewer, interviewer_id, for_update=True):
            db.rollback()
            return Err("Interviewer not found", NOT_FOUND)

        session = BehavioralInterviewSession(
            user_id=ctx.user.id,
            behavioral_interview_id=behavioral_interview.id,
            interviewer_id=interviewer_id or None,
            question_count=question_count,
            duration=duration,
            experience_level=level,
            target_role=target_role.strip(),
            questions=list(questions or []),
            start_time=datetime.utcnow(),
        )
        db.add(session)
        db.commit()
        db.refresh(session)
        response = BehavioralInterviewSessionResponse.model_validate(session)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating behavioral interview session: {e}", exc_info=True)
        return Err("Failed to start interview session", CREATE_FAILED)

    if ctx.views is not None:
        ctx.views.invalidate(DASHBOARD_PATH)

    logger.info(
        f"Behavioral interview session created: session_id={session.id}, user_id={ctx.user.id}, "
        f"behavioral_interview_id={behavioral_interview_id}, questions={len(session.questions)}"
    )
    return Ok(response)


@authorized
def start_behavioral_interview_session(ctx: AuthedContext, body: Any) -> Result[BehavioralInterviewSessionResponse]:
    """Validate a raw session request behind the identity check, then start the session."""
    payload = validate_body(BehavioralInterviewSessionCreate, body)
    return create_behavioral_interview_session(
        ctx,
        behavioral_interview_id=payload.behavioral_interview_id,
        question_count=payload.question_count,
        duration=payload.duration,
        experience_level=payload.experience_level,
        target_role=payload.target_role,
        interviewer_id=payload.interviewer_id,
        questions=payload.questions,
    )


@authorized
def get_behavioral_interview_session(ctx: AuthedContext, session_id: str) -> Result[BehavioralInterviewSessionResponse]:
    try:
        session = ctx.db.query(BehavioralInterviewSession).filter(
            BehavioralInterviewSession.id == session_id,
            BehavioralInterviewSession.user_id == ctx.user.id,
        ).first()
        if not session:
            return Err("Session not found", NOT_FOUND)
        return Ok(BehavioralInterviewSessionResponse.model_validate(session))
    except SQLAlchemyError as e:
        logger.error(f"Error fetching behavioral interview session {session_id}: {e}", exc_info=True)
        return Err("Failed to fetch session", FETCH_FAILED)


@authorized
def get_user_behavioral_interview_stats(ctx: AuthedContext) -> Result[List[BehavioralInterviewStat]]:
    try:
        rows = count_sessions_by_entity(
            ctx.db,
            BehavioralInterviewSession,
            BehavioralInterviewSession.behavioral_interview_id,
            ctx.user.id,
        )
        return Ok([
            BehavioralInterviewStat(behavioral_interview_id=entity_id, count=count)
            for entity_id, count in rows
        ])
    except SQLAlchemyError as e:
        logger.error(f"Error fetching behavioral interview stats: {e}", exc_info=True)
        return Err("Failed to fetch stats", FETCH_FAILED)
