"""
Interviewer access functions.

Interviewers are read-mostly personas created by seeding.
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.result import Ok, Err, Result, NOT_FOUND, FETCH_FAILED, CREATE_FAILED
from app.db.models.interviewer import Interviewer
from app.schemas.catalog import InterviewerResponse, InterviewerCreate
from app.services.catalog import list_active, get_active

logger = logging.getLogger(__name__)


def get_interviewers(db: Session) -> Result[List[InterviewerResponse]]:
    """Active interviewers, alphabetical by name."""
    try:
        interviewers = list_active(db, Interviewer, order_by=[Interviewer.name])
        return Ok([InterviewerResponse.model_validate(i) for i in interviewers])
    except SQLAlchemyError as e:
        logger.error(f"Error fetching interviewers: {e}", exc_info=True)
        return Err("Failed to fetch interviewers", FETCH_FAILED)


def get_interviewer_by_id(db: Session, interviewer_id: str) -> Result[InterviewerResponse]:
    try:
        interviewer = get_active(db, Interviewer, interviewer_id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching interviewer {interviewer_id}: {e}", exc_info=True)
        return Err("Failed to fetch interviewer", FETCH_FAILED)

    if not interviewer:
        return Err("Interviewer not found", NOT_FOUND)
    return Ok(InterviewerResponse.model_validate(interviewer))


def find_interviewer(db: Session, interviewer_id: str) -> Optional[Interviewer]:
    """
    Raw active-interviewer lookup for callers that need the ORM row (agent id).

    Returns None when absent or inactive. Persistence errors propagate.
    """
    return get_active(db, Interviewer, interviewer_id)


def create_interviewer(db: Session, payload: InterviewerCreate) -> Result[InterviewerResponse]:
    """
    Create an active interviewer.

    Idempotent on (name, agent_id): an existing match is returned unchanged.
    """
    try:
        existing = db.query(Interviewer).filter(
            Interviewer.name == payload.name,
            Interviewer.agent_id == payload.agent_id,
        ).first()
        if existing:
            logger.info(f"Interviewer already exists: name={payload.name}, id={existing.id}")
            return Ok(InterviewerResponse.model_validate(existing))

        data = payload.model_dump(exclude_none=True)
        interviewer = Interviewer(**data, is_active=True)
        db.add(interviewer)
        db.commit()
        db.refresh(interviewer)

        logger.info(f"Interviewer created: id={interviewer.id}, name={interviewer.name}")
        return Ok(InterviewerResponse.model_validate(interviewer))
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating interviewer: {e}", exc_info=True)
        return Err("Failed to create interviewer", CREATE_FAILED)
