"""
Shared pytest fixtures for Task Manager tests.

Every app and session fixture gets its own in-memory SQLite database, so
tests never need an external service and never share state.
"""

from datetime import datetime, timezone
from typing import Callable, Dict, Generator

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from task_manager.config import Settings
from task_manager.db.config import create_db_engine
from task_manager.db.init import init_db
from task_manager.main import create_app

TEST_SECRET = "test-signing-secret-0123456789abcdef"
DUE_DATE = "2026-11-01T10:00:00"
DUE_INSTANT = datetime(2026, 11, 1, 10, 0, 0, tzinfo=timezone.utc)


def as_instant(text: str) -> datetime:
    """Parse an ISO-8601 timestamp from a response body."""
    return datetime.fromisoformat(text.replace("Z", "+00:00"))


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://", auth_secret=TEST_SECRET, log_level="WARNING")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """TestClient with startup events run, so tables exist."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def session() -> Generator[Session, None, None]:
    """Database session for service-level tests."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    with Session(engine) as db_session:
        yield db_session
    engine.dispose()


@pytest.fixture
def register_and_login(client) -> Callable[[str, str], Dict[str, str]]:
    """Register a user, log in, and return Authorization headers for them."""

    def _register_and_login(username: str, password: str = "s3cret-pass") -> Dict[str, str]:
        response = client.post("/register", json={"username": username, "password": password})
        assert response.status_code == 201, response.text
        response = client.post("/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _register_and_login


@pytest.fixture
def alice(register_and_login) -> Dict[str, str]:
    return register_and_login("alice")


@pytest.fixture
def bob(register_and_login) -> Dict[str, str]:
    return register_and_login("bob")
