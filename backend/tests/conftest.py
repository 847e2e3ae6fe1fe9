"""Pytest fixtures — a throwaway SQLite file per test for isolated runs."""
import pytest
from fastapi.testclient import TestClient

from invite_app.config import Settings
from invite_app.database import Database
from invite_app.main import create_app

ADMIN_PASSWORD = "let-me-in"
SESSION_SECRET = "test-session-secret"


@pytest.fixture(scope="function")
def settings(tmp_path):
    """Settings pointing at a per-test database and backup directory."""
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite:///{tmp_path / 'invitations.db'}",
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        SESSION_SECRET=SESSION_SECRET,
        BACKUP_DIR=str(tmp_path / "backups"),
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture(scope="function")
def database(settings):
    """Create a fresh storage handle with all tables for each test."""
    database = Database(settings.DATABASE_URL, busy_timeout=settings.SQLITE_BUSY_TIMEOUT)
    database.create_all()
    yield database
    database.dispose()


@pytest.fixture(scope="function")
def db(database):
    """Yield a database session, closed after the test."""
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(settings, database):
    """FastAPI TestClient wired to the per-test storage handle."""
    app = create_app(settings=settings, database=database)
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="function")
def admin_client(client):
    """TestClient already holding the admin cookie."""
    resp = client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
    assert resp.status_code == 200, resp.text
    return client


# ---------------------------------------------------------------------------
# Helper: create an invitation via the API, returns the JSON response dict
# ---------------------------------------------------------------------------
def create_test_invitation(client: TestClient, name: str = "Test Guest", slug: str = None, **extra) -> dict:
    """Helper — POST /api/invitations (admin cookie required) and return response JSON."""
    payload = {"name": name, "pronoun": "you", "message": "Come to the party!", **extra}
    if slug is not None:
        payload["slug"] = slug
    resp = client.post("/api/invitations", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()
