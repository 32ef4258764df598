from sqlalchemy import Column, String, DateTime, Boolean, Text, JSON, Enum
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.db.models.enums import UserRole, JobRole
from app.db.models.mixins import generate_id


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String, nullable=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=True)  # null for OAuth-only accounts
    email_verified = Column(DateTime(timezone=True), nullable=True)
    is_oauth = Column(Boolean, default=False, nullable=False)
    role = Column(Enum(UserRole), default=UserRole.USER, nullable=False)
    job_role = Column(Enum(JobRole), nullable=True)
    resume_url = Column(String, nullable=True)
    extracted_text = Column(Text, nullable=True)
    skills = Column(JSON, default=list, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    resume_jobs = relationship("ResumeJob", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"
