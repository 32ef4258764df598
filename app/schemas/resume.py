"""
Pydantic schemas for resume storage, upload and parsing endpoints.
"""
from typing import List, Optional
from pydantic import Field, field_validator

from app.schemas.base import CamelModel


class ResumeJobInput(CamelModel):
    title: str = Field(..., min_length=1)
    skills: List[str] = Field(default_factory=list)


class SaveResumeRequest(CamelModel):
    """Body of POST /api/save-resume."""
    resume_url: str = Field(..., min_length=1)
    jobs: List[ResumeJobInput]
    skills: List[str]


class ResumeJobResponse(CamelModel):
    id: str
    title: str
    skills: List[str] = Field(default_factory=list)


class ResumeDataResponse(CamelModel):
    resume_jobs: List[ResumeJobResponse] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    resume_url: Optional[str] = None


class UploadResumeResponse(CamelModel):
    success: bool = True
    file_url: str
    file_name: str


class ResumeTextUrl(CamelModel):
    """Uploaded resume location plus the plain text extracted from it."""
    resume_url: Optional[str] = None
    extracted_text: Optional[str] = None


class SaveResumeTextUrlRequest(CamelModel):
    resume_url: str = Field(..., min_length=1)
    extracted_text: str = Field(..., min_length=1)


class ExtractResumeJobsRequest(CamelModel):
    extracted_text: str = Field(..., min_length=1)


class ParsedJob(CamelModel):
    """One job title and its skills as extracted by the model."""
    title: str
    skills: List[str]

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank")
        return value

    @field_validator("skills")
    @classmethod
    def skills_not_blank(cls, value: List[str]) -> List[str]:
        if any(not skill.strip() for skill in value):
            raise ValueError("skills must not contain blank entries")
        return value


class ExtractResumeJobsResponse(CamelModel):
    parsed_jobs: List[ParsedJob]
    # Every job's skills in order, duplicates kept
    parsed_skills: List[str]
