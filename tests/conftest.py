"""
Musician Site - Pytest Configuration & Shared Fixtures

Settings are read from the environment when the package is first
imported, so the test database and uploads directory are pinned here
before anything from ``musician_site`` is loaded.
"""

import os
import tempfile

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOADS_DIR"] = tempfile.mkdtemp(prefix="musician-uploads-")
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "s3cret-pass"
os.environ["SEED_DEMO_CONTENT"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from musician_site.core.security import get_session_store
from musician_site.database import Base, SessionLocal, engine, init_db
from musician_site.main import app
from musician_site.services.uploads import get_upload_storage

ADMIN_CREDENTIALS = {"username": "admin", "password": "s3cret-pass"}


# ---------------------------------------------------------------------------
# Database fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def fresh_state():
    """Give each test empty tables and no open sessions or pending uploads."""
    Base.metadata.drop_all(bind=engine)
    init_db()
    get_session_store().clear()
    get_upload_storage().clear_pending()
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


# ---------------------------------------------------------------------------
# HTTP client fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def client():
    """Anonymous client; entering the context runs startup (admin seed)."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def admin_client(client):
    """Client holding a logged-in admin session cookie."""
    response = client.post("/api/login", json=ADMIN_CREDENTIALS)
    assert response.status_code == 200
    return client


# ---------------------------------------------------------------------------
# Sample payloads
# ---------------------------------------------------------------------------


@pytest.fixture
def album_payload():
    return {
        "title": "Sissan",
        "cover_image": "/uploads/cover-1",
        "release_date": "2022-02-25T00:00:00",
        "spotify_url": "https://open.spotify.com/album/xyz",
        "description": "Debut EP",
    }


@pytest.fixture
def event_payload():
    return {
        "title": "Release show",
        "date": "2026-12-12T20:00:00",
        "location": "Ouagadougou",
        "venue": "Institut Français",
        "type": "concert",
    }


@pytest.fixture
def press_payload():
    return {
        "title": "A year of revelations",
        "source": "Infos Culture",
        "url": "https://example.com/article",
        "snippet": "Interview",
        "date": "2025-01-14T00:00:00",
    }
