"""
Resume operations: file upload, stored resume data and extracted text.

Every operation here is user-scoped and goes through ``@authorized``, so an
anonymous caller is rejected before a body is validated or storage is built.
"""
import logging
import posixpath
import time
from typing import Any, BinaryIO, Callable, Optional
from urllib.parse import quote

from sqlalchemy.exc import SQLAlchemyError

from app.core.auth_dependency import AuthedContext
from app.core.errors import ValidationFailureError
from app.core.procedures import authorized
from app.core.result import Ok, Err, Result, NOT_FOUND, FETCH_FAILED, UPDATE_FAILED
from app.core.view_cache import RESUME_ANALYSIS_PATH
from app.db.models.resume_job import ResumeJob
from app.db.models.user import User
from app.schemas.base import validate_body
from app.schemas.resume import (
    ResumeDataResponse,
    ResumeJobResponse,
    ResumeTextUrl,
    SaveResumeRequest,
    SaveResumeTextUrlRequest,
    UploadResumeResponse,
)
from app.services.storage_service import ObjectStorage

logger = logging.getLogger(__name__)

ALLOWED_RESUME_TYPES = {
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


def storage_key_name(file_name: str) -> str:
    """Last path segment of a client-supplied name, so it cannot escape the user's prefix."""
    name = posixpath.basename(file_name.replace("\\", "/")).strip()
    if name in ("", ".", ".."):
        return "resume"
    return name


@authorized
def upload_resume(
    ctx: AuthedContext,
    storage_factory: Callable[[], ObjectStorage],
    file_name: Optional[str],
    fileobj: Optional[BinaryIO],
    content_type: Optional[str] = None,
) -> UploadResumeResponse:
    """
    Upload a resume file and return its public URL.

    Storage is only built after the caller is known, so anonymous uploads
    never need or touch storage settings.

    Raises:
        ValidationFailureError: missing file or name, unsupported type, empty file
        ConfigurationError: storage settings are missing
        UpstreamFailureError: the upload was rejected
    """
    if fileobj is None or not file_name:
        raise ValidationFailureError("Missing file or fileName")
    if content_type and content_type not in ALLOWED_RESUME_TYPES:
        raise ValidationFailureError(f"Unsupported file type: {content_type}")

    content = fileobj.read()
    if not content:
        raise ValidationFailureError("Uploaded file is empty")

    key = f"resumes/{ctx.user.id}/{int(time.time() * 1000)}-{storage_key_name(file_name)}"
    storage = storage_factory()
    url = storage.upload(
        key,
        content,
        content_type=content_type,
        # S3 metadata values must be ASCII
        metadata={"userId": ctx.user.id, "originalName": quote(file_name)},
    )

    logger.info(f"Resume uploaded: user_id={ctx.user.id}, key={key}")
    return UploadResumeResponse(file_url=url, file_name=file_name)


@authorized
def save_resume(ctx: AuthedContext, body: Any) -> Result[None]:
    """
    Store the caller's uploaded resume URL, skills and extracted job titles.

    Body: {resumeUrl, jobs: [{title, skills}], skills}. The profile update and
    the job rows are committed together.
    """
    payload = validate_body(SaveResumeRequest, body, "Missing required fields")

    db = ctx.db
    try:
        user = db.query(User).filter(User.id == ctx.user.id).first()
        if not user:
            return Err("User not found", NOT_FOUND)

        user.resume_url = payload.resume_url
        user.skills = list(payload.skills)
        for job in payload.jobs:
            db.add(ResumeJob(user_id=user.id, title=job.title, skills=list(job.skills)))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error saving resume data: {e}", exc_info=True)
        return Err("Failed to save resume data", UPDATE_FAILED)

    logger.info(
        f"Resume saved: user_id={ctx.user.id}, jobs={len(payload.jobs)}, skills={len(payload.skills)}"
    )
    return Ok(None)


@authorized
def get_resume_data(ctx: AuthedContext) -> Result[ResumeDataResponse]:
    try:
        user = ctx.db.query(User).filter(User.id == ctx.user.id).first()
        if not user:
            return Err("User not found", NOT_FOUND)
        return Ok(ResumeDataResponse(
            resume_jobs=[ResumeJobResponse.model_validate(job) for job in user.resume_jobs],
            skills=user.skills or [],
            resume_url=user.resume_url,
        ))
    except SQLAlchemyError as e:
        logger.error(f"Error fetching resume data: {e}", exc_info=True)
        return Err("Failed to fetch resume data", FETCH_FAILED)


@authorized
def save_resume_text_url(ctx: AuthedContext, body: Any) -> Result[ResumeTextUrl]:
    """Store the caller's resume URL together with the text extracted from it."""
    payload = validate_body(SaveResumeTextUrlRequest, body, "Missing required fields")

    db = ctx.db
    try:
        user = db.query(User).filter(User.id == ctx.user.id).first()
        if not user:
            return Err("User not found", NOT_FOUND)
        user.resume_url = payload.resume_url
        user.extracted_text = payload.extracted_text
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error saving resume text: {e}", exc_info=True)
        return Err("Failed to save resume text", UPDATE_FAILED)

    if ctx.views is not None:
        ctx.views.invalidate(RESUME_ANALYSIS_PATH)

    logger.info(f"Resume text saved: user_id={ctx.user.id}, chars={len(payload.extracted_text)}")
    return Ok(ResumeTextUrl(resume_url=payload.resume_url, extracted_text=payload.extracted_text))


@authorized
def get_resume_text_url(ctx: AuthedContext) -> Result[ResumeTextUrl]:
    """The caller's stored resume URL and extracted text; both None when never saved."""
    try:
        user = ctx.db.query(User).filter(User.id == ctx.user.id).first()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching resume text: {e}", exc_info=True)
        return Err("Failed to fetch resume text", FETCH_FAILED)

    if not user:
        return Ok(ResumeTextUrl())
    return Ok(ResumeTextUrl(resume_url=user.resume_url or None, extracted_text=user.extracted_text or None))
