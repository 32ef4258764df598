"""
User accounts and profile operations.
"""
import logging
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.auth_dependency import AuthedContext
from app.core.errors import ValidationFailureError
from app.core.procedures import authorized
from app.core.result import Ok, Err, Result, NOT_FOUND, UPDATE_FAILED
from app.core.security import hash_password
from app.db.models.user import User
from app.schemas.auth import IdentityResponse
from app.schemas.base import validate_body
from app.schemas.user import UpdateRoleRequest, UserResponse
from app.services.question_service import parse_job_role

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    try:
        return db.query(User).filter(User.email == email).first()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching user by email: {e}", exc_info=True)
        return None


def create_user(db: Session, name: str, email: str, password: str) -> User:
    """
    Register a credentials user.

    The unique index on email is the final check: a concurrent signup that
    slips past the lookup is reported the same way.

    Raises:
        ValidationFailureError: if the email is already registered
    """
    email = email.lower()
    if get_user_by_email(db, email):
        raise ValidationFailureError("Email already registered")

    user = User(name=name, email=email, password_hash=hash_password(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info(f"Signup lost a race on an existing email: {e.orig}")
        raise ValidationFailureError("Email already registered") from e
    db.refresh(user)

    logger.info(f"User registered: user_id={user.id}")
    return user


@authorized
def get_identity(ctx: AuthedContext) -> IdentityResponse:
    return IdentityResponse.model_validate(ctx.user)


@authorized
def update_user_role(ctx: AuthedContext, body: Any) -> Result[UserResponse]:
    """Set the caller's target job role; unknown roles are a validation failure."""
    payload = validate_body(UpdateRoleRequest, body)
    job_role = parse_job_role(payload.role)
    db = ctx.db
    try:
        user = db.query(User).filter(User.id == ctx.user.id).first()
        if not user:
            return Err("User not found", NOT_FOUND)
        user.job_role = job_role
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating user role: {e}", exc_info=True)
        return Err("Failed to update user role", UPDATE_FAILED)

    logger.info(f"User role updated: user_id={user.id}, job_role={job_role.value}")
    return Ok(UserResponse.model_validate(user))
