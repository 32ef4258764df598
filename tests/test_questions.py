"""
Tests for the role question bank and LLM question generation.
"""
import json

import pytest

from app.core import config
from app.core.errors import ValidationFailureError
from app.db.models.enums import JobRole
from app.db.models.question import Question
from app.llm.openai_provider import get_llm_provider
from app.main import app
from app.services.question_service import parse_job_role


@pytest.fixture
def question_bank(db_session):
    db_session.add_all([
        Question(role=JobRole.BACKEND_DEVELOPER, question="How would you design a rate limiter?"),
        Question(role=JobRole.BACKEND_DEVELOPER, question="Explain database transactions."),
        Question(role=JobRole.UX_DESIGNER, question="Walk me through your design process."),
    ])
    db_session.commit()


def test_questions_by_role(client, question_bank):
    response = client.get("/api/questions", params={"role": "BACKEND_DEVELOPER"})

    assert response.status_code == 200
    questions = {q["question"] for q in response.json()["data"]}
    assert questions == {"How would you design a rate limiter?", "Explain database transactions."}


def test_questions_role_is_case_insensitive(client, question_bank):
    response = client.get("/api/questions", params={"role": "ux_designer"})

    assert response.status_code == 200
    assert len(response.json()["data"]) == 1


def test_questions_invalid_role(client, question_bank):
    response = client.get("/api/questions", params={"role": "ASTRONAUT"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["code"] == "VALIDATION_FAILED"
    assert "ASTRONAUT" in body["error"]


def test_parse_job_role():
    assert parse_job_role("data_scientist") is JobRole.DATA_SCIENTIST
    assert parse_job_role(JobRole.PRODUCT_MANAGER) is JobRole.PRODUCT_MANAGER
    with pytest.raises(ValidationFailureError):
        parse_job_role("")


GENERATE_BODY = {
    "name": "Backend Screen",
    "objective": "Assess API design skills",
    "number": 3,
    "context": "Python, FastAPI, PostgreSQL",
}


def test_generate_questions_passes_model_output_through(client, llm):
    response = client.post("/api/generate-questions", json=GENERATE_BODY)

    assert response.status_code == 200
    payload = json.loads(response.json()["response"])
    assert set(payload) == {"description", "questions"}

    sent = llm.requests[0]
    assert sent["json_mode"] is True
    assert sent["messages"][0]["role"] == "system"
    assert "Backend Screen" in sent["messages"][1]["content"]
    assert "Number of questions to be generated: 3" in sent["messages"][1]["content"]


def test_generate_questions_does_not_validate_json(client, llm):
    llm.content = "not json at all"

    response = client.post("/api/generate-questions", json=GENERATE_BODY)

    assert response.status_code == 200
    assert response.json() == {"response": "not json at all"}


def test_generate_behavioral_questions_uses_star_prompt(client, llm):
    response = client.post("/api/generate-behavioral-questions", json=GENERATE_BODY)

    assert response.status_code == 200
    sent = llm.requests[0]["messages"]
    assert "STAR" in sent[0]["content"]
    assert "STAR method framework" in sent[1]["content"]


def test_generate_questions_rejects_bad_number(client):
    response = client.post("/api/generate-questions", json={**GENERATE_BODY, "number": 0})

    assert response.status_code == 422


def test_generate_questions_without_api_key(client, monkeypatch):
    monkeypatch.setattr(config, "OPENAI_API_KEY", None)
    app.dependency_overrides.pop(get_llm_provider)

    response = client.post("/api/generate-questions", json=GENERATE_BODY)

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Server is not configured: missing OPENAI_API_KEY",
        "code": "CONFIGURATION_ERROR",
    }
