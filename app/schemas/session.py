"""
Pydantic schemas for practice sessions and session stats.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import Field

from app.db.models.enums import ExperienceLevel
from app.schemas.base import CamelModel
from app.schemas.catalog import (
    InterviewerResponse,
    PopularInterviewResponse,
    BehavioralInterviewResponse,
)


class PopularInterviewSessionCreate(CamelModel):
    """Request body for starting a popular-topic practice session."""
    popular_interview_id: str = Field(..., min_length=1)
    question_count: int = Field(..., ge=1, le=50)
    duration: int = Field(..., ge=1, le=180, description="Minutes")
    interviewer_id: Optional[str] = None


class BehavioralInterviewSessionCreate(CamelModel):
    """Request body for starting a behavioral practice session."""
    behavioral_interview_id: str = Field(..., min_length=1)
    question_count: int = Field(..., ge=1, le=50)
    duration: int = Field(..., ge=1, le=180, description="Minutes")
    # Parsed by the service so unknown levels are reported as a validation failure
    experience_level: str = Field(..., min_length=1)
    target_role: str = Field(..., min_length=1, max_length=200)
    interviewer_id: Optional[str] = None
    questions: Optional[List[str]] = None


class PopularInterviewSessionResponse(CamelModel):
    id: str
    user_id: str
    popular_interview_id: str
    interviewer_id: Optional[str] = None
    question_count: int
    duration: int
    start_time: datetime
    popular_interview: PopularInterviewResponse
    interviewer: Optional[InterviewerResponse] = None


class BehavioralInterviewSessionResponse(CamelModel):
    id: str
    user_id: str
    behavioral_interview_id: str
    interviewer_id: Optional[str] = None
    question_count: int
    duration: int
    experience_level: ExperienceLevel
    target_role: str
    questions: List[str] = Field(default_factory=list)
    start_time: datetime
    behavioral_interview: BehavioralInterviewResponse
    interviewer: Optional[InterviewerResponse] = None


class PopularInterviewStat(CamelModel):
    popular_interview_id: str
    count: int


class BehavioralInterviewStat(CamelModel):
    behavioral_interview_id: str
    count: int


class InterviewResponseCreate(CamelModel):
    """One question/answer exchange recorded during a popular-topic session."""
    question_text: str = Field(..., min_length=1)
    user_response: Optional[str] = None
    ai_response: Optional[str] = None
    response_time: Optional[int] = Field(None, ge=0, description="Seconds")


class InterviewResponseResponse(CamelModel):
    id: str
    session_id: str
    question_text: str
    user_response: Optional[str] = None
    ai_response: Optional[str] = None
    response_time: Optional[int] = None
    created_at: Optional[datetime] = None
