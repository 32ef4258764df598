from sqlalchemy import Column, String, Integer, Boolean, Text, DateTime, Index
from sqlalchemy.sql import func
from app.db.base import Base
from app.db.models.mixins import generate_id


class PopularInterview(Base):
    """Catalog entry for a popular technical topic."""
    __tablename__ = "popular_interviews"

    id = Column(String(36), primary_key=True, default=generate_id)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    difficulty = Column(String, nullable=True)  # Beginner / Intermediate / Advanced
    duration = Column(Integer, nullable=True)  # suggested minutes
    category = Column(String, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        Index("idx_popular_category_title", "category", "title"),
    )
