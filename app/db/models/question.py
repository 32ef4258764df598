from sqlalchemy import Column, String, Text, Enum
from app.db.base import Base
from app.db.models.enums import JobRole
from app.db.models.mixins import generate_id


class Question(Base):
    __tablename__ = "questions"

    id = Column(String(36), primary_key=True, default=generate_id)
    role = Column(Enum(JobRole), nullable=False, index=True)
    question = Column(Text, nullable=False)
