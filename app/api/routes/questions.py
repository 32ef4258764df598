from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.result import envelope_response
from app.db.session import get_db
from app.llm.openai_provider import get_llm_provider
from app.llm.provider import LLMProvider
from app.schemas.questions import GenerateQuestionsRequest, GenerateQuestionsResponse
from app.services.question_service import get_questions_by_role
from app.services.question_generator import generate_questions, generate_behavioral_questions

router = APIRouter(prefix="/api", tags=["Questions"])


@router.get("/questions")
def list_questions(role: str = Query(..., description="Job role, e.g. BACKEND_DEVELOPER"), db: Session = Depends(get_db)):
    return envelope_response(get_questions_by_role(db, role))


@router.post("/generate-questions", response_model=GenerateQuestionsResponse)
def generate_interview_questions(
    payload: GenerateQuestionsRequest,
    provider: LLMProvider = Depends(get_llm_provider),
):
    content = generate_questions(provider, payload.name, payload.objective, payload.number, payload.context)
    return GenerateQuestionsResponse(response=content)


@router.post("/generate-behavioral-questions", response_model=GenerateQuestionsResponse)
def generate_behavioral_interview_questions(
    payload: GenerateQuestionsRequest,
    provider: LLMProvider = Depends(get_llm_provider),
):
    content = generate_behavioral_questions(provider, payload.name, payload.objective, payload.number, payload.context)
    return GenerateQuestionsResponse(response=content)
