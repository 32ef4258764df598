"""
Shared read paths for soft-deletable catalog tables.

Every external read filters on ``is_active``: an inactive row is reported the
same way as a missing one.
"""
import logging
from typing import Any, List, Optional, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


def list_active(db: Session, model, order_by: Sequence[Any]) -> List[Any]:
    """All active rows of a catalog model in a deterministic order."""
    # id breaks ties so equal sort keys never reorder between calls
    return (
        db.query(model)
        .filter(model.is_active.is_(True))
        .order_by(*order_by, model.id)
        .all()
    )


def get_active(db: Session, model, entity_id: str, for_update: bool = False) -> Optional[Any]:
    """Look up an active row by id, or None when it is absent or inactive."""
    if not entity_id:
        return None
    query = db.query(model).filter(model.id == entity_id, model.is_active.is_(True))
    if for_update:
        # Held until the surrounding transaction commits; ignored by SQLite
        query = query.with_for_update()
    return query.first()


def count_sessions_by_entity(db: Session, session_model, entity_column, user_id: str) -> List[tuple]:
    """
    Count one user's sessions per catalog entity.

    Returns (entity_id, count) tuples ordered by entity id. The user filter is
    applied before grouping; callers must pass the resolved caller's id.
    """
    return (
        db.query(entity_column, func.count(session_model.id))
        .filter(session_model.user_id == user_id)
        .group_by(entity_column)
        .order_by(entity_column)
        .all()
    )
