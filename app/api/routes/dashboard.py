from fastapi import APIRouter, Depends

from app.core.auth_dependency import RequestContext, get_request_context
from app.services.dashboard_service import get_dashboard

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("")
def dashboard(ctx: RequestContext = Depends(get_request_context)):
    """Catalog listings and the caller's practice counts; sections that fail to load are empty."""
    return {"success": True, "data": get_dashboard(ctx)}
