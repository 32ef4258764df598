"""
Shared fixtures: in-memory SQLite, dependency overrides and fake providers.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.base import Base
from app.db.session import get_db
from app.db.models.user import User
from app.db.models.interviewer import Interviewer
from app.db.models.popular_interview import PopularInterview
from app.db.models.behavioral_interview import BehavioralInterview
from app.core.security import hash_password, create_access_token
from app.core.view_cache import view_cache
from app.llm.openai_provider import get_llm_provider
from app.llm.provider import LLMProvider, LLMResponse
from app.services.call_service import get_call_client
from app.services.storage_service import get_storage_factory


# Setup in-memory SQLite database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db():
    """Override get_db dependency for testing."""
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


class FakeStorage:
    """Records uploads instead of talking to S3."""

    def __init__(self):
        self.uploads = []

    def upload(self, key, body, content_type=None, metadata=None):
        self.uploads.append({"key": key, "body": body, "content_type": content_type, "metadata": metadata})
        return f"https://test-bucket.s3.us-east-1.amazonaws.com/{key}"


class FakeCallClient:
    """Records web-call registrations instead of calling the provider."""

    def __init__(self):
        self.calls = []

    def create_web_call(self, agent_id, dynamic_variables=None):
        self.calls.append({"agent_id": agent_id, "dynamic_variables": dynamic_variables})
        return {"call_id": "call_123", "access_token": "web-call-token", "agent_id": agent_id}


class FakeLLMProvider(LLMProvider):
    """Returns a canned JSON completion and keeps the prompts it was sent."""

    def __init__(self, content='{"description": "A short interview.", "questions": [{"question": "Why?"}]}'):
        self.content = content
        self.requests = []

    def chat(self, messages, model=None, temperature=0.7, max_tokens=None, json_mode=False):
        self.requests.append({"messages": messages, "json_mode": json_mode})
        return LLMResponse(content=self.content, tokens_in=10, tokens_out=20, model="fake")


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def call_client():
    return FakeCallClient()


@pytest.fixture
def llm():
    return FakeLLMProvider()


@pytest.fixture(scope="function", autouse=True)
def setup_db(storage, call_client, llm):
    """Create tables and install dependency overrides for each test."""
    Base.metadata.create_all(bind=test_engine)
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage_factory] = lambda: (lambda: storage)
    app.dependency_overrides[get_call_client] = lambda: call_client
    app.dependency_overrides[get_llm_provider] = lambda: llm
    view_cache.clear()
    yield
    app.dependency_overrides.clear()
    view_cache.clear()
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db_session():
    """Provide a database session for tests."""
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


def make_user(db_session, email: str, name: str = "Test User") -> User:
    user = User(name=name, email=email, password_hash=hash_password("testpass123"))
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'sub': user.id, 'email': user.email})}"}


@pytest.fixture
def test_user(db_session):
    return make_user(db_session, "test@example.com")


@pytest.fixture
def other_user(db_session):
    return make_user(db_session, "other@example.com", name="Other User")


@pytest.fixture
def user_headers(test_user):
    return auth_headers(test_user)


@pytest.fixture
def catalog(db_session):
    """
    A small catalog with active and inactive rows of every kind.

    Returns a dict of ids keyed by a short name.
    """
    rows = {
        "lisa": Interviewer(id="interviewer_lisa", name="Explorer Lisa", agent_id="agent_lisa", is_active=True,
                            rapport=7, exploration=10, empathy=7, speed=5, image="/interviewers/Lisa.png",
                            description="Explores deeply.", audio="Lisa.wav", specialties=["Exploration"]),
        "bob": Interviewer(id="interviewer_bob", name="Empathetic Bob", agent_id=None, is_active=True),
        "retired": Interviewer(id="interviewer_old", name="Alex Retired", agent_id="agent_old", is_active=False),
        "hash": PopularInterview(title="Hash Tables", category="Data Structures", difficulty="Intermediate",
                                 duration=25, is_active=True),
        "stacks": PopularInterview(title="Stacks vs Queues", category="Data Structures", difficulty="Beginner",
                                   duration=20, is_active=True),
        "rest": PopularInterview(title="REST API 101", category="Web Development", difficulty="Beginner",
                                 duration=30, is_active=True),
        "legacy": PopularInterview(title="Applets", category="Algorithms", is_active=False),
        "teamwork": BehavioralInterview(title="Teamwork", category="Common Themes", is_active=True),
        "google": BehavioralInterview(title="Google Behavioral", category="Company Specific", company="Google",
                                      is_active=True),
        "hidden": BehavioralInterview(title="Archived Theme", category="Common Themes", is_active=False),
    }
    db_session.add_all(rows.values())
    db_session.commit()
    return {name: row.id for name, row in rows.items()}


@pytest.fixture
def other_headers(other_user):
    return auth_headers(other_user)
