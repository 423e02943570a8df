"""
Configuration for pytest tests.
"""

import os
import tempfile

# Settings are read when portfolio.config is first imported
TEST_DATA_DIR = tempfile.mkdtemp(prefix="portfolio_test_data_")
os.environ["GROQ_API_KEY"] = "test_api_key"
os.environ["ADMIN_PASSWORD"] = "test-admin-password"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "development"
os.environ["DATA_DIR"] = TEST_DATA_DIR
os.environ["YOUTUBE_API_KEY"] = ""

import pytest
from pathlib import Path
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from portfolio.api.app import app
from portfolio.config import config
from portfolio.core.auth import session_store
from portfolio.db.database import get_db


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Remove the test data directory after the session."""
    yield

    import shutil
    shutil.rmtree(TEST_DATA_DIR, ignore_errors=True)


@pytest.fixture
def engine():
    """A fresh in-memory SQLite database, shared by every connection."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    """Database session bound to the in-memory engine."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def clear_sessions():
    """Start every test without admin sessions."""
    session_store.clear()
    yield
    session_store.clear()


@pytest.fixture
def admin_password(monkeypatch):
    password = "test-admin-password"
    monkeypatch.setattr(config, "ADMIN_PASSWORD", password)
    return password


@pytest.fixture
def client(engine):
    """API test client using the in-memory database."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client, admin_password):
    """Authorization header for a logged-in admin."""
    response = client.post("/api/v1/auth", json={"password": admin_password})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def blog_data():
    """Fixture with a valid blog post payload."""
    return {
        "title": "Testing FastAPI Apps",
        "slug": "testing-fastapi-apps",
        "excerpt": "How to test a FastAPI service.",
        "content": "# Testing\n\nUse the TestClient.",
        "cover_image": "https://res.cloudinary.com/demo/image/upload/cover.png",
        "published": True,
    }


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://youtu.be/V3TUEeB0kW0?si=-InVol0JhtWji-6R"


@pytest.fixture(scope="session")
def test_data_dir():
    """Return the test data directory."""
    return Path(TEST_DATA_DIR)
