"""Shared test fixtures for the travel admin API."""

import os

# Settings are read once at import time, so configure before importing the app.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BASE_URL"] = "https://site.test"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["BREVO_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from travel_admin.core.config import settings
from travel_admin.core.deps import get_db
from travel_admin.db.mixins import Base
import travel_admin.db.models  # noqa: F401
from travel_admin.main import app
from travel_admin.services.admin_seed import ensure_default_admin


@pytest.fixture
def engine():
    """A private in-memory SQLite database per test."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory, tmp_path, monkeypatch):
    """TestClient wired to the test database, writing uploads under tmp_path."""
    monkeypatch.setattr(settings, "PUBLIC_DIR", str(tmp_path / "public"))

    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin(db):
    return ensure_default_admin(db)


@pytest.fixture
def auth_headers(client, admin):
    r = client.post(
        "/api/auth/login",
        json={"username": settings.ADMIN_USERNAME, "password": settings.ADMIN_PASSWORD},
    )
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['token']}"}
