"""
Database models module.

This module imports all database models to ensure they are registered with SQLAlchemy's Base.metadata
before table creation and Alembic autogeneration.
"""
from app.db.models.enums import UserRole, JobRole, ExperienceLevel
from app.db.models.user import User
from app.db.models.resume_job import ResumeJob
from app.db.models.interviewer import Interviewer
from app.db.models.popular_interview import PopularInterview
from app.db.models.behavioral_interview import BehavioralInterview
from app.db.models.question import Question
from app.db.models.interview_session import PopularInterviewSession, BehavioralInterviewSession, InterviewResponse

__all__ = [
    "UserRole",
    "JobRole",
    "ExperienceLevel",
    "User",
    "ResumeJob",
    "Interviewer",
    "PopularInterview",
    "BehavioralInterview",
    "Question",
    "PopularInterviewSession",
    "BehavioralInterviewSession",
    "InterviewResponse",
]
