"""
Practice session models.

One row per practice attempt; rows are appended when a session starts and are
not mutated afterwards. Question/answer exchanges of a popular-topic session
are appended to interview_responses.
"""
from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime, JSON, Enum, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.db.models.enums import ExperienceLevel
from app.db.models.mixins import generate_id


class PopularInterviewSession(Base):
    __tablename__ = "popular_interview_sessions"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    popular_interview_id = Column(String(36), ForeignKey("popular_interviews.id"), nullable=False, index=True)
    interviewer_id = Column(String(64), ForeignKey("interviewers.id"), nullable=True)
    question_count = Column(Integer, nullable=False)
    duration = Column(Integer, nullable=False)  # minutes
    start_time = Column(DateTime, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    popular_interview = relationship("PopularInterview")
    responses = relationship("InterviewResponse", back_populates="session", cascade="all, delete-orphan")
    interviewer = relationship("Interviewer")

    __table_args__ = (
        Index("idx_popular_session_user_interview", "user_id", "popular_interview_id"),
    )

    def __repr__(self):
        return f"<PopularInterviewSession(id={self.id}, user_id={self.user_id})>"


class BehavioralInterviewSession(Base):
    __tablename__ = "behavioral_interview_sessions"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    behavioral_interview_id = Column(String(36), ForeignKey("behavioral_interviews.id"), nullable=False, index=True)
    interviewer_id = Column(String(64), ForeignKey("interviewers.id"), nullable=True)
    question_count = Column(Integer, nullable=False)
    duration = Column(Integer, nullable=False)
    experience_level = Column(Enum(ExperienceLevel), nullable=False)
    target_role = Column(String, nullable=False)
    questions = Column(JSON, default=list, nullable=False)  # pre-generated question texts
    start_time = Column(DateTime, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    behavioral_interview = relationship("BehavioralInterview")
    interviewer = relationship("Interviewer")

    __table_args__ = (
        Index("idx_behavioral_session_user_interview", "user_id", "behavioral_interview_id"),
    )


class InterviewResponse(Base):
    __tablename__ = "interview_responses"

    id = Column(String(36), primary_key=True, default=generate_id)
    session_id = Column(String(36), ForeignKey("popular_interview_sessions.id"), nullable=False, index=True)
    question_text = Column(Text, nullable=False)
    user_response = Column(Text, nullable=True)
    ai_response = Column(Text, nullable=True)
    response_time = Column(Integer, nullable=True)  # seconds
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    session = relationship("PopularInterviewSession", back_populates="responses")

    def __repr__(self):
        return f"<InterviewResponse(id={self.id}, session_id={self.session_id})>"
