"""
Dashboard summary: catalog listings plus the caller's practice counts.

Failed reads degrade to empty lists so the dashboard still renders. Only a
fully successful summary is cached; session creation invalidates it.
"""
import logging
from typing import Any, Dict, List

from fastapi.encoders import jsonable_encoder

from app.core.auth_dependency import AuthedContext
from app.core.procedures import authorized
from app.core.result import Ok, Result
from app.core.view_cache import DASHBOARD_PATH
from app.services.interviewer_service import get_interviewers
from app.services.popular_interview_service import get_popular_interviews, get_user_popular_interview_stats
from app.services.behavioral_interview_service import get_behavioral_interviews, get_user_behavioral_interview_stats

logger = logging.getLogger(__name__)


def _data_or_empty(result: Result, section: str, failures: List[str]) -> Any:
    if isinstance(result, Ok):
        return result.data
    logger.warning(f"Dashboard section unavailable: section={section}, error={result.error}")
    failures.append(section)
    return []


@authorized
def get_dashboard(ctx: AuthedContext) -> Dict[str, Any]:
    if ctx.views is not None:
        cached = ctx.views.get(DASHBOARD_PATH, ctx.user.id)
        if cached is not None:
            return cached

    failures: List[str] = []
    summary = jsonable_encoder({
        "interviewers": _data_or_empty(get_interviewers(ctx.db), "interviewers", failures),
        "popularInterviews": _data_or_empty(get_popular_interviews(ctx.db), "popularInterviews", failures),
        "behavioralInterviews": _data_or_empty(get_behavioral_interviews(ctx.db), "behavioralInterviews", failures),
        "popularStats": _data_or_empty(get_user_popular_interview_stats(ctx), "popularStats", failures),
        "behavioralStats": _data_or_empty(get_user_behavioral_interview_stats(ctx), "behavioralStats", failures),
    })

    if ctx.views is not None and not failures:
        ctx.views.set(DASHBOARD_PATH, ctx.user.id, summary)
    return summary
