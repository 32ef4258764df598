"""
Pydantic schemas for catalog entities (interviewers, popular and behavioral interviews).
"""
from typing import List, Optional
from pydantic import Field, field_validator

from app.schemas.base import CamelModel


class InterviewerResponse(CamelModel):
    """Interviewer as presented to clients; optional display fields are defaulted."""
    id: str
    name: str
    image: str = Field("/interviewers/default.png", description="Avatar path")
    description: str = Field("Professional AI interviewer")
    specialties: List[str] = Field(
        default_factory=lambda: ["Technical Interviews", "Behavioral Questions", "Problem Solving"]
    )
    rapport: int = 7
    exploration: int = 7
    empathy: int = 7
    speed: int = 5
    audio: str = ""
    agent_id: Optional[str] = None

    @field_validator(
        "image", "description", "specialties", "rapport", "exploration", "empathy", "speed", "audio",
        mode="before",
    )
    @classmethod
    def default_when_blank(cls, value, info):
        """Seeded rows may leave display fields empty; fall back to the defaults."""
        if value is None or value == "" or value == []:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class InterviewerCreate(CamelModel):
    """Seed payload for an interviewer."""
    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    agent_id: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    audio: Optional[str] = None
    specialties: List[str] = Field(default_factory=list)
    rapport: Optional[int] = Field(None, ge=1, le=10)
    exploration: Optional[int] = Field(None, ge=1, le=10)
    empathy: Optional[int] = Field(None, ge=1, le=10)
    speed: Optional[int] = Field(None, ge=1, le=10)


class PopularInterviewResponse(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    difficulty: Optional[str] = None
    duration: Optional[int] = None
    category: str
    is_active: bool


class BehavioralInterviewResponse(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    category: str
    company: Optional[str] = None
    is_active: bool
