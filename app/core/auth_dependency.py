"""
Identity resolution and per-request context.

Handlers never look identity up on their own: routes depend on
``get_request_context`` and pass the resulting ``RequestContext`` into the
service layer explicitly.
"""
import logging
from dataclasses import dataclass, replace
from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.core.security import decode_access_token
from app.core.view_cache import ViewCache, get_view_cache
from app.db.models.enums import UserRole, JobRole
from app.db.models.user import User
from app.db.session import get_db

logger = logging.getLogger(__name__)

# auto_error=False: a missing token is the normal unauthenticated state, not an error
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


@dataclass(frozen=True)
class AuthUser:
    """Authenticated-user descriptor."""
    id: str
    email: str
    name: Optional[str]
    role: UserRole
    job_role: Optional[JobRole]
    is_oauth: bool

    @classmethod
    def from_user(cls, user: User) -> "AuthUser":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            role=user.role or UserRole.USER,
            job_role=user.job_role,
            is_oauth=bool(user.is_oauth),
        )


@dataclass(frozen=True)
class RequestContext:
    """Explicit execution context handed to every service-layer handler."""
    db: Session
    user: Optional[AuthUser] = None
    views: Optional[ViewCache] = None

    def with_user(self, user: Optional[AuthUser]) -> "RequestContext":
        return replace(self, user=user)


@dataclass(frozen=True)
class AuthedContext(RequestContext):
    """RequestContext whose user is guaranteed to be present."""
    user: AuthUser = None


def resolve_identity(db: Session, token: Optional[str]) -> Optional[AuthUser]:
    """
    Resolve the caller from a bearer token.

    Returns None for a missing, invalid or expired token, and for a token
    whose user no longer exists. Never raises for the unauthenticated case.
    """
    if not token:
        return None

    payload = decode_access_token(token)
    if not payload:
        logger.debug("Rejected bearer token (invalid or expired)")
        return None

    user_id = payload.get("sub")
    if not user_id:
        return None

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        logger.info(f"Token subject no longer exists: user_id={user_id}")
        return None

    return AuthUser.from_user(user)


def get_request_context(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
    views: ViewCache = Depends(get_view_cache),
) -> RequestContext:
    """Request context dependency; user is None when the caller is anonymous."""
    return RequestContext(db=db, user=resolve_identity(db, token), views=views)
