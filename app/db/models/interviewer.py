"""
Interviewer model: a virtual interview persona backed by a voice agent.
"""
from sqlalchemy import Column, String, Integer, Boolean, Text, JSON, DateTime
from sqlalchemy.sql import func
from app.db.base import Base
from app.db.models.mixins import generate_id


class Interviewer(Base):
    __tablename__ = "interviewers"

    id = Column(String(64), primary_key=True, default=generate_id)
    name = Column(String, nullable=False, index=True)
    agent_id = Column(String, nullable=True)  # voice-call provider agent
    image = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    audio = Column(String, nullable=True)
    specialties = Column(JSON, default=list, nullable=False)

    # Behavioral trait scores, 1-10
    rapport = Column(Integer, nullable=True)
    exploration = Column(Integer, nullable=True)
    empathy = Column(Integer, nullable=True)
    speed = Column(Integer, nullable=True)

    is_active = Column(Boolean, default=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Interviewer(id={self.id}, name={self.name}, active={self.is_active})>"
