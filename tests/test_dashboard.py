"""
Tests for the dashboard summary and its view cache.
"""
from datetime import datetime

from sqlalchemy.exc import OperationalError

from app.core.view_cache import ViewCache, DASHBOARD_PATH, view_cache
from app.db.models.interview_session import PopularInterviewSession
from app.services import popular_interview_service


def popular_stats(client, headers):
    return client.get("/dashboard", headers=headers).json()["data"]["popularStats"]


def test_dashboard_requires_auth(client):
    response = client.get("/dashboard")

    assert response.status_code == 401


def test_dashboard_summary(client, catalog, user_headers):
    response = client.get("/dashboard", headers=user_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert [i["name"] for i in data["interviewers"]] == ["Empathetic Bob", "Explorer Lisa"]
    assert len(data["popularInterviews"]) == 3
    assert len(data["behavioralInterviews"]) == 2
    assert data["popularStats"] == []
    assert data["behavioralStats"] == []


def test_dashboard_served_from_cache_until_session_created(client, db_session, catalog, test_user, user_headers):
    assert popular_stats(client, user_headers) == []

    # Written behind the service's back: the cached view is not refreshed
    db_session.add(PopularInterviewSession(
        user_id=test_user.id,
        popular_interview_id=catalog["hash"],
        question_count=5,
        duration=30,
        start_time=datetime.utcnow(),
    ))
    db_session.commit()
    assert popular_stats(client, user_headers) == []

    client.post(
        "/api/popular-interviews/sessions",
        json={"popularInterviewId": catalog["hash"], "questionCount": 5, "duration": 30},
        headers=user_headers,
    )

    assert popular_stats(client, user_headers) == [{"popularInterviewId": catalog["hash"], "count": 2}]


def test_dashboard_cache_is_per_user(client, catalog, user_headers, other_headers):
    client.post(
        "/api/popular-interviews/sessions",
        json={"popularInterviewId": catalog["rest"], "questionCount": 5, "duration": 30},
        headers=user_headers,
    )

    assert popular_stats(client, user_headers) == [{"popularInterviewId": catalog["rest"], "count": 1}]
    assert popular_stats(client, other_headers) == []


def test_view_cache_invalidate_drops_every_user():
    cache = ViewCache()
    cache.set(DASHBOARD_PATH, "u1", {"a": 1})
    cache.set(DASHBOARD_PATH, "u2", {"a": 2})
    cache.set("/other", "u1", {"b": 1})

    assert cache.invalidate(DASHBOARD_PATH) == 2
    assert cache.get(DASHBOARD_PATH, "u1") is None
    assert cache.get("/other", "u1") == {"b": 1}


def test_failed_section_is_empty_and_summary_not_cached(client, catalog, test_user, user_headers, monkeypatch):
    client.post(
        "/api/popular-interviews/sessions",
        json={"popularInterviewId": catalog["hash"], "questionCount": 5, "duration": 30},
        headers=user_headers,
    )

    def database_down(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is unavailable"))

    monkeypatch.setattr(popular_interview_service, "count_sessions_by_entity", database_down)
    degraded = client.get("/dashboard", headers=user_headers)

    assert degraded.status_code == 200
    data = degraded.json()["data"]
    assert data["popularStats"] == []
    assert len(data["popularInterviews"]) == 3
    assert view_cache.get(DASHBOARD_PATH, test_user.id) is None

    monkeypatch.undo()

    assert popular_stats(client, user_headers) == [{"popularInterviewId": catalog["hash"], "count": 1}]
