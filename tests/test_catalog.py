"""
Tests for catalog reads: interviewers, popular and behavioral interviews.
"""
import pytest
from sqlalchemy.exc import OperationalError

from app.db.models.interviewer import Interviewer
from app.schemas.catalog import InterviewerCreate
from app.services.interviewer_service import get_interviewers, get_interviewer_by_id, create_interviewer
from app.core.result import Ok, Err, NOT_FOUND, FETCH_FAILED
from app.services import behavioral_interview_service, interviewer_service, popular_interview_service


def test_list_interviewers_only_active_sorted_by_name(client, catalog):
    response = client.get("/api/interviewers")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert [i["name"] for i in body["data"]] == ["Empathetic Bob", "Explorer Lisa"]


def test_interviewer_display_defaults(client, catalog):
    """Blank display fields fall back to defaults; set fields pass through."""
    response = client.get(f"/api/interviewers/{catalog['bob']}")

    assert response.status_code == 200
    bob = response.json()["data"]
    assert bob["image"] == "/interviewers/default.png"
    assert bob["description"] == "Professional AI interviewer"
    assert bob["specialties"] == ["Technical Interviews", "Behavioral Questions", "Problem Solving"]
    assert (bob["rapport"], bob["exploration"], bob["empathy"], bob["speed"]) == (7, 7, 7, 5)
    assert bob["audio"] == ""

    lisa = client.get(f"/api/interviewers/{catalog['lisa']}").json()["data"]
    assert lisa["exploration"] == 10
    assert lisa["agentId"] == "agent_lisa"
    assert lisa["specialties"] == ["Exploration"]


def test_inactive_interviewer_is_not_found(client, catalog):
    response = client.get(f"/api/interviewers/{catalog['retired']}")

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Interviewer not found", "code": "NOT_FOUND"}


def test_unknown_interviewer_is_not_found(db_session, catalog):
    result = get_interviewer_by_id(db_session, "does-not-exist")

    assert isinstance(result, Err)
    assert result.code == NOT_FOUND


def test_create_interviewer_is_idempotent(db_session):
    payload = InterviewerCreate(name="Technical Sarah", agent_id="agent_sarah", specialties=["System Design"])

    first = create_interviewer(db_session, payload)
    second = create_interviewer(db_session, payload)

    assert isinstance(first, Ok) and isinstance(second, Ok)
    assert first.data.id == second.data.id
    assert db_session.query(Interviewer).filter(Interviewer.name == "Technical Sarah").count() == 1


def test_get_interviewers_function_returns_ok(db_session, catalog):
    result = get_interviewers(db_session)

    assert isinstance(result, Ok)
    assert catalog["retired"] not in [i.id for i in result.data]


def test_list_popular_interviews_active_and_ordered(client, catalog):
    """Ordered by category then title; the inactive 'Algorithms' row never shows up."""
    response = client.get("/api/popular-interviews")

    assert response.status_code == 200
    data = response.json()["data"]
    assert [i["title"] for i in data] == ["Hash Tables", "Stacks vs Queues", "REST API 101"]
    assert all(i["isActive"] for i in data)


def test_list_popular_interviews_is_stable(client, catalog):
    first = client.get("/api/popular-interviews").json()["data"]
    second = client.get("/api/popular-interviews").json()["data"]

    assert [i["id"] for i in first] == [i["id"] for i in second]


def test_get_popular_interview_by_id(client, catalog):
    response = client.get(f"/api/popular-interviews/{catalog['rest']}")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["title"] == "REST API 101"
    assert data["duration"] == 30


def test_inactive_popular_interview_is_not_found(client, catalog):
    response = client.get(f"/api/popular-interviews/{catalog['legacy']}")

    assert response.status_code == 404
    assert response.json()["error"] == "Interview not found"


def test_empty_catalog_returns_empty_list(client):
    response = client.get("/api/popular-interviews")

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": []}


def test_list_behavioral_interviews(client, catalog):
    response = client.get("/api/behavioral-interviews")

    assert response.status_code == 200
    titles = [i["title"] for i in response.json()["data"]]
    assert titles == ["Teamwork", "Google Behavioral"]


def test_inactive_behavioral_interview_is_not_found(client, catalog):
    response = client.get(f"/api/behavioral-interviews/{catalog['hidden']}")

    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def database_down(*args, **kwargs):
    raise OperationalError("SELECT", {}, Exception("database is unavailable"))


@pytest.mark.parametrize("path, service, message", [
    ("/api/interviewers", interviewer_service, "Failed to fetch interviewers"),
    ("/api/popular-interviews", popular_interview_service, "Failed to fetch popular interviews"),
    ("/api/behavioral-interviews", behavioral_interview_service, "Failed to fetch behavioral interviews"),
])
def test_list_read_failure_is_fetch_failed(client, monkeypatch, path, service, message):
    monkeypatch.setattr(service, "list_active", database_down)

    response = client.get(path)

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": message, "code": FETCH_FAILED}


def test_get_by_id_read_failure_is_fetch_failed(client, catalog, monkeypatch):
    monkeypatch.setattr(interviewer_service, "get_active", database_down)
    monkeypatch.setattr(popular_interview_service, "get_active", database_down)

    interviewer = client.get(f"/api/interviewers/{catalog['lisa']}")
    interview = client.get(f"/api/popular-interviews/{catalog['hash']}")

    assert interviewer.status_code == 500
    assert interviewer.json()["code"] == FETCH_FAILED
    assert interview.status_code == 500
    assert interview.json() == {"success": False, "error": "Failed to fetch interview details", "code": FETCH_FAILED}


def test_get_by_id_read_failure_function_result(db_session, monkeypatch):
    monkeypatch.setattr(interviewer_service, "get_active", database_down)

    result = get_interviewer_by_id(db_session, "interviewer_lisa")

    assert isinstance(result, Err)
    assert result.code == FETCH_FAILED
