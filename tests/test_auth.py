"""
Tests for signup, login and identity resolution.
"""
from datetime import timedelta

from app.core.auth_dependency import resolve_identity
from app.core.security import create_access_token, decode_access_token, hash_password, verify_password
from app.db.models.user import User
from app.services import user_service


def test_signup_success(client, db_session):
    response = client.post(
        "/auth/signup",
        json={"name": "Jane Doe", "email": "Jane.Doe@Example.com", "password": "SecurePass123"},
    )

    assert response.status_code == 201
    assert response.json()["message"] == "User created successfully"

    user = db_session.query(User).filter(User.email == "jane.doe@example.com").first()
    assert user is not None
    assert user.id == response.json()["user_id"]
    assert user.password_hash != "SecurePass123"


def test_signup_duplicate_email(client, test_user):
    response = client.post(
        "/auth/signup",
        json={"name": "Again", "email": "test@example.com", "password": "SecurePass123"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Email already registered"


def test_signup_short_password(client):
    response = client.post(
        "/auth/signup",
        json={"name": "Jane", "email": "jane@example.com", "password": "short"},
    )

    assert response.status_code == 422


def test_login_and_me(client, test_user):
    login = client.post("/auth/login", data={"username": "test@example.com", "password": "testpass123"})

    assert login.status_code == 200
    token = login.json()["access_token"]
    assert login.json()["token_type"] == "bearer"

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["id"] == test_user.id
    assert me.json()["email"] == "test@example.com"
    assert me.json()["role"] == "USER"


def test_login_wrong_password(client, test_user):
    response = client.post("/auth/login", data={"username": "test@example.com", "password": "wrong"})

    assert response.status_code == 401


def test_me_anonymous(client):
    response = client.get("/auth/me")

    assert response.status_code == 401
    assert response.json()["code"] == "NOT_AUTHENTICATED"


def test_resolve_identity(db_session, test_user):
    token = create_access_token({"sub": test_user.id})

    identity = resolve_identity(db_session, token)

    assert identity.id == test_user.id
    assert identity.is_oauth is False


def test_resolve_identity_unknown_or_expired(db_session, test_user):
    assert resolve_identity(db_session, None) is None
    assert resolve_identity(db_session, create_access_token({"sub": "deleted-user"})) is None
    expired = create_access_token({"sub": test_user.id}, expires_delta=timedelta(minutes=-5))
    assert resolve_identity(db_session, expired) is None


def test_password_hashing():
    hashed = hash_password("testpass123")

    assert verify_password("testpass123", hashed)
    assert not verify_password("other", hashed)
    assert not verify_password("testpass123", None)


def test_decode_rejects_tampered_token():
    token = create_access_token({"sub": "abc"})

    assert decode_access_token(token)["sub"] == "abc"
    assert decode_access_token(token + "x") is None


def test_signup_race_on_existing_email(client, db_session, test_user, monkeypatch):
    # The pre-insert lookup misses, as it would for a concurrent signup
    monkeypatch.setattr(user_service, "get_user_by_email", lambda db, email: None)

    response = client.post(
        "/auth/signup",
        json={"name": "Twin", "email": test_user.email, "password": "SecurePass123"},
    )

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Email already registered", "code": "VALIDATION_FAILED"}
    assert db_session.query(User).filter(User.email == test_user.email).count() == 1
