from sqlalchemy import Column, String, Boolean, Text, DateTime, Index
from sqlalchemy.sql import func
from app.db.base import Base
from app.db.models.mixins import generate_id


class BehavioralInterview(Base):
    """Catalog entry for a behavioral theme, optionally tied to a company."""
    __tablename__ = "behavioral_interviews"

    id = Column(String(36), primary_key=True, default=generate_id)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String, nullable=False)
    company = Column(String, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        Index("idx_behavioral_category_company_title", "category", "company", "title"),
    )
