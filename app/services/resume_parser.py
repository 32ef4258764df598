"""
LLM-backed extraction of job titles and skills from resume text.
"""
import logging
import re
from typing import List

from pydantic import TypeAdapter, ValidationError

from app.core.errors import AppError
from app.llm.provider import LLMProvider
from app.llm.prompts import RESUME_PARSER_SYSTEM_PROMPT, extract_resume_jobs_prompt, build_messages
from app.schemas.resume import ExtractResumeJobsResponse, ParsedJob

logger = logging.getLogger(__name__)

EXPECTED_JOB_COUNT = 2

_FENCE_OPEN = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"\s*```$")

_parsed_jobs = TypeAdapter(List[ParsedJob])


class ResumeExtractionError(AppError):
    """The model's answer was not two well-formed jobs."""
    code = "EXTRACTION_FAILED"
    status_code = 500
    default_message = "Failed to extract resume data"


def strip_code_fences(text: str) -> str:
    text = text.strip()
    return _FENCE_CLOSE.sub("", _FENCE_OPEN.sub("", text)).strip()


def parse_jobs(content: str) -> List[ParsedJob]:
    """
    Parse and check the model output.

    Raises:
        ResumeExtractionError: malformed JSON, wrong shape, or not exactly two jobs
    """
    try:
        jobs = _parsed_jobs.validate_json(strip_code_fences(content))
    except ValidationError as e:
        logger.warning(f"Resume extraction returned an invalid structure: {e.error_count()} error(s)")
        raise ResumeExtractionError() from e

    if len(jobs) != EXPECTED_JOB_COUNT:
        logger.warning(f"Resume extraction returned {len(jobs)} jobs, expected {EXPECTED_JOB_COUNT}")
        raise ResumeExtractionError()
    return jobs


def extract_resume_jobs(provider: LLMProvider, extracted_text: str) -> ExtractResumeJobsResponse:
    logger.info(f"Extracting resume jobs: chars={len(extracted_text)}")
    messages = build_messages(RESUME_PARSER_SYSTEM_PROMPT, extract_resume_jobs_prompt(extracted_text))
    response = provider.chat(messages, temperature=0.2, max_tokens=2048)

    jobs = parse_jobs(response.content)
    logger.info(f"Resume jobs extracted: titles={[job.title for job in jobs]}, tokens_out={response.tokens_out}")
    return ExtractResumeJobsResponse(
        parsed_jobs=jobs,
        parsed_skills=[skill for job in jobs for skill in job.skills],
    )
