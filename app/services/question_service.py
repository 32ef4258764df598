"""
Question bank lookups keyed by job role.
"""
import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import ValidationFailureError
from app.core.result import Ok, Err, Result, FETCH_FAILED
from app.db.models.enums import JobRole
from app.db.models.question import Question
from app.schemas.questions import QuestionResponse

logger = logging.getLogger(__name__)


def parse_job_role(value) -> JobRole:
    """
    Parse a job role from client input.

    Accepts the enum value case-insensitively ("backend_developer").

    Raises:
        ValidationFailureError: for anything that is not a known role
    """
    if isinstance(value, JobRole):
        return value
    try:
        return JobRole(str(value).strip().upper())
    except ValueError:
        allowed = ", ".join(role.value for role in JobRole)
        raise ValidationFailureError(f"Invalid job role: {value!r} (expected one of {allowed})")


def get_questions_by_role(db: Session, role) -> Result[List[QuestionResponse]]:
    job_role = parse_job_role(role)
    try:
        questions = (
            db.query(Question)
            .filter(Question.role == job_role)
            .order_by(Question.id)
            .all()
        )
        return Ok([QuestionResponse.model_validate(q) for q in questions])
    except SQLAlchemyError as e:
        logger.error(f"Error fetching questions for role {job_role.value}: {e}", exc_info=True)
        return Err("Failed to fetch questions", FETCH_FAILED)
