"""
Tests for extracting job titles and skills from resume text.
"""
import json

import pytest

from app.llm.prompts import extract_resume_jobs_prompt
from app.services.resume_parser import ResumeExtractionError, parse_jobs, strip_code_fences

JOBS = [
    {"title": "Backend Developer", "skills": ["Python", "FastAPI", "PostgreSQL", "Redis", "Docker"]},
    {"title": "Data Engineer", "skills": ["Spark", "Airflow", "Python", "SQL", "Kafka"]},
]


def extract(client, body):
    return client.post("/api/extract-resume-jobs", json=body)


def test_extract_resume_jobs(client, llm):
    llm.content = json.dumps(JOBS)

    response = extract(client, {"extractedText": "Jane Doe, backend developer at Acme."})

    assert response.status_code == 200
    body = response.json()
    assert body["parsedJobs"] == JOBS
    # Flattened in order, duplicates kept
    assert body["parsedSkills"] == JOBS[0]["skills"] + JOBS[1]["skills"]
    assert body["parsedSkills"].count("Python") == 2

    sent = llm.requests[0]["messages"]
    assert "Jane Doe, backend developer at Acme." in sent[-1]["content"]


def test_extract_accepts_fenced_output(client, llm):
    llm.content = "```json\n" + json.dumps(JOBS) + "\n```"

    response = extract(client, {"extractedText": "resume"})

    assert response.status_code == 200
    assert [job["title"] for job in response.json()["parsedJobs"]] == ["Backend Developer", "Data Engineer"]


def test_extract_missing_text(client, llm):
    response = extract(client, {})

    assert response.status_code == 400
    assert response.json()["error"] == "Missing extracted text"
    assert llm.requests == []


@pytest.mark.parametrize("content", [
    "not json at all",
    json.dumps(JOBS[:1]),
    json.dumps(JOBS + [{"title": "Manager", "skills": ["Jira"]}]),
    json.dumps([{"title": " ", "skills": ["Go"]}, JOBS[1]]),
    json.dumps([{"title": "SRE", "skills": ["Go", ""]}, JOBS[1]]),
    json.dumps([{"title": "SRE", "skills": "Go"}, JOBS[1]]),
    json.dumps({"jobs": JOBS}),
])
def test_extract_rejects_malformed_model_output(client, llm, content):
    llm.content = content

    response = extract(client, {"extractedText": "resume"})

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Failed to extract resume data",
        "code": "EXTRACTION_FAILED",
    }


def test_strip_code_fences():
    assert strip_code_fences("```json\n[1]\n```") == "[1]"
    assert strip_code_fences("```\n[1]```") == "[1]"
    assert strip_code_fences("  [1]  ") == "[1]"


def test_parse_jobs_requires_exactly_two():
    with pytest.raises(ResumeExtractionError):
        parse_jobs("[]")

    assert [job.title for job in parse_jobs(json.dumps(JOBS))] == ["Backend Developer", "Data Engineer"]


def test_resume_prompt_wraps_text():
    prompt = extract_resume_jobs_prompt("Ten years of Go.")

    assert "*** RESUME STARTS ***\nTen years of Go.\n*** RESUME ENDS ***" in prompt
    assert "exactly TWO DIFFERENT job titles" in prompt
