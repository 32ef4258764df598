"""
Resume upload, storage and parsing endpoints.

Bodies and form fields are optional at the FastAPI layer: the services check
identity first and then report what is missing.
"""
from typing import Callable, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from app.api.request_body import json_body_docs, read_json_body
from app.core.auth_dependency import RequestContext, get_request_context
from app.core.result import Ok, envelope_response
from app.llm.openai_provider import get_llm_provider
from app.llm.provider import LLMProvider
from app.schemas.base import validate_body
from app.schemas.resume import (
    ExtractResumeJobsRequest,
    ExtractResumeJobsResponse,
    SaveResumeRequest,
    UploadResumeResponse,
)
from app.services.resume_parser import extract_resume_jobs as extract_jobs_from_text
from app.services.resume_service import save_resume as save_resume_data, upload_resume as upload_resume_file
from app.services.storage_service import ObjectStorage, get_storage_factory

router = APIRouter(prefix="/api", tags=["Resume"])


@router.post("/save-resume", openapi_extra=json_body_docs(SaveResumeRequest))
async def save_resume(request: Request, ctx: RequestContext = Depends(get_request_context)):
    """Store the caller's resume URL with the jobs and skills extracted from it."""
    body = await read_json_body(request)
    result = save_resume_data(ctx, body)
    if isinstance(result, Ok):
        return {"success": True}
    return envelope_response(result)


@router.post("/upload-resume", response_model=UploadResumeResponse)
def upload_resume(
    file: Optional[UploadFile] = File(None),
    file_name: Optional[str] = Form(None, alias="fileName"),
    ctx: RequestContext = Depends(get_request_context),
    storage_factory: Callable[[], ObjectStorage] = Depends(get_storage_factory),
):
    """Upload a resume file to object storage and return its public URL."""
    return upload_resume_file(
        ctx,
        storage_factory,
        file_name,
        file.file if file is not None else None,
        content_type=file.content_type if file is not None else None,
    )


@router.post(
    "/extract-resume-jobs",
    response_model=ExtractResumeJobsResponse,
    openapi_extra=json_body_docs(ExtractResumeJobsRequest),
)
async def extract_resume_jobs(request: Request, provider: LLMProvider = Depends(get_llm_provider)):
    """Ask the model for two job titles with their skills from plain resume text."""
    payload = validate_body(ExtractResumeJobsRequest, await read_json_body(request), "Missing extracted text")
    return extract_jobs_from_text(provider, payload.extracted_text)
