from fastapi import APIRouter, Depends, Request

from app.api.request_body import json_body_docs, read_json_body
from app.core.auth_dependency import RequestContext, get_request_context
from app.core.result import envelope_response
from app.schemas.resume import SaveResumeTextUrlRequest
from app.schemas.user import UpdateRoleRequest
from app.services.resume_service import get_resume_data, get_resume_text_url, save_resume_text_url
from app.services.user_service import update_user_role

router = APIRouter(prefix="/api/user", tags=["User"])


@router.put("/role", openapi_extra=json_body_docs(UpdateRoleRequest))
async def set_role(request: Request, ctx: RequestContext = Depends(get_request_context)):
    body = await read_json_body(request)
    return envelope_response(update_user_role(ctx, body))


@router.get("/resume")
def read_resume(ctx: RequestContext = Depends(get_request_context)):
    return envelope_response(get_resume_data(ctx))


@router.put("/resume-text", openapi_extra=json_body_docs(SaveResumeTextUrlRequest))
async def write_resume_text(request: Request, ctx: RequestContext = Depends(get_request_context)):
    body = await read_json_body(request)
    return envelope_response(save_resume_text_url(ctx, body))


@router.get("/resume-text")
def read_resume_text(ctx: RequestContext = Depends(get_request_context)):
    return envelope_response(get_resume_text_url(ctx))
