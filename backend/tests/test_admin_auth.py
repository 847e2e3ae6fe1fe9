"""Tests for the shared-password admin session."""
from tests.conftest import ADMIN_PASSWORD, SESSION_SECRET


class TestAdminSession:

    def test_login_sets_cookie(self, client):
        resp = client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
        assert resp.status_code == 200
        assert resp.json() == {"success": True}
        assert client.cookies.get("admin_token") == SESSION_SECRET
        assert "httponly" in resp.headers["set-cookie"].lower()
        assert client.get("/api/invitations").status_code == 200

    def test_wrong_password(self, client):
        resp = client.post("/api/admin/login", json={"password": "nope"})
        assert resp.status_code == 401
        assert "admin_token" not in client.cookies

    def test_logout_clears_cookie(self, admin_client):
        assert admin_client.get("/api/invitations").status_code == 200
        resp = admin_client.post("/api/admin/logout")
        assert resp.status_code == 200
        assert admin_client.get("/api/invitations").status_code == 401

    def test_unconfigured_password_never_matches(self, settings, database):
        from fastapi.testclient import TestClient
        from invite_app.main import create_app

        unset = settings.model_copy(update={"ADMIN_PASSWORD": "", "SESSION_SECRET": ""})
        with TestClient(create_app(settings=unset, database=database)) as c:
            assert c.post("/api/admin/login", json={"password": ""}).status_code == 401
            c.cookies.set("admin_token", "")
            assert c.get("/api/invitations").status_code == 401


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}
