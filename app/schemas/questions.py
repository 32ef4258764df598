"""
Pydantic schemas for question lookup and generation.
"""
from pydantic import BaseModel, Field


class GenerateQuestionsRequest(BaseModel):
    """Body of the question generation endpoints."""
    name: str = Field(..., min_length=1, description="Interview title")
    objective: str = Field(..., min_length=1)
    number: int = Field(..., ge=1, le=50, description="How many questions to generate")
    context: str = Field(..., min_length=1)


class QuestionResponse(BaseModel):
    question: str

    class Config:
        from_attributes = True


class GenerateQuestionsResponse(BaseModel):
    # Raw model output; expected to be JSON with "questions" and "description"
    response: str
