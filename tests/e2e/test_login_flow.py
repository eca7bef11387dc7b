"""End-to-end tests for the Google login flow."""

from urllib.parse import parse_qs, urlparse

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from guestbook.adapter.google import MockGoogleOAuthClient
from guestbook.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by mock Google and in-memory storage."""
    return TestClient(create_app(build_test_container()))


def login(client: TestClient, **kwargs) -> tuple[str, dict[str, list[str]]]:
    response = client.get("/oauth/login", follow_redirects=False, **kwargs)
    assert response.status_code == 302
    location = response.headers["location"]
    return location, parse_qs(urlparse(location).query)


class TestLoginFlow:
    """End-to-end tests for /oauth/login and /oauth/callback."""

    def test_login_redirects_to_google(self, client):
        location, query = login(client)

        assert location.startswith("https://accounts.google.com/o/oauth2/auth")
        assert query["redirect_uri"] == ["http://testserver/oauth/callback"]
        assert query["state"]

    def test_login_honors_proxy_headers(self, client):
        _, query = login(
            client, headers={"X-Forwarded-Scheme": "https", "X-Server-Port": "8443"}
        )

        assert query["redirect_uri"] == ["https://testserver:8443/oauth/callback"]

    def test_callback_returns_identity(self, client):
        _, query = login(client)

        response = client.get(
            "/oauth/callback", params={"code": "abc", "state": query["state"][0]}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["provider_subject_id"] == MockGoogleOAuthClient.SUBJECT_ID
        assert data["email"] == "mock@example.com"
        assert data["is_new"] is True
        assert data["after"] == "success"
        assert "access_token" not in data

    def test_second_login_reuses_identity(self, client):
        _, query = login(client)
        first = client.get(
            "/oauth/callback", params={"code": "abc", "state": query["state"][0]}
        ).json()

        _, query = login(client)
        second = client.get(
            "/oauth/callback", params={"code": "def", "state": query["state"][0]}
        ).json()

        assert second["id"] == first["id"]
        assert second["is_new"] is False

    def test_denied_consent_is_server_error(self, client):
        _, query = login(client)

        response = client.get(
            "/oauth/callback",
            params={"error": "access_denied", "state": query["state"][0]},
        )

        assert response.status_code == 500
        assert "access_denied" in response.json()["detail"]

    def test_forged_state_is_server_error(self, client):
        response = client.get(
            "/oauth/callback", params={"code": "abc", "state": "forged"}
        )

        assert response.status_code == 500
        assert response.json()["detail"] == "Invalid state"

    def test_missing_security_key_fails_login(self, monkeypatch):
        monkeypatch.setenv("AUTH__SECURITY_KEY", "")
        client = TestClient(create_app(build_test_container()))

        response = client.get("/oauth/login", follow_redirects=False)

        assert response.status_code == 500
        assert "Security key" in response.json()["detail"]


@pytest.fixture
def sqlite_client(tmp_path, monkeypatch):
    """Create test client backed by mock Google and a SQLite file."""
    monkeypatch.setenv("DATABASE__URL", f"sqlite+aiosqlite:///{tmp_path}/guestbook.db")
    with TestClient(create_app(build_test_container(unmock={"persistence"}))) as client:
        yield client


def fail_commits(monkeypatch) -> None:
    async def commit(self):
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(AsyncSession, "commit", commit)


class TestLoginStorageFailure:
    """Storage failures during login reach the caller."""

    def test_callback_fails_when_identity_not_committed(self, sqlite_client, monkeypatch):
        original_commit = AsyncSession.commit
        _, query = login(sqlite_client)

        fail_commits(monkeypatch)
        response = sqlite_client.get(
            "/oauth/callback", params={"code": "abc", "state": query["state"][0]}
        )

        assert response.status_code == 500
        assert "disk I/O error" in response.json()["detail"]

        # Nothing from the failed callback was kept
        monkeypatch.setattr(AsyncSession, "commit", original_commit)
        _, query = login(sqlite_client)
        retry = sqlite_client.get(
            "/oauth/callback", params={"code": "def", "state": query["state"][0]}
        )
        assert retry.status_code == 200
        assert retry.json()["is_new"] is True

    def test_identity_durable_across_requests(self, sqlite_client):
        _, query = login(sqlite_client)
        first = sqlite_client.get(
            "/oauth/callback", params={"code": "abc", "state": query["state"][0]}
        ).json()

        _, query = login(sqlite_client)
        second = sqlite_client.get(
            "/oauth/callback", params={"code": "def", "state": query["state"][0]}
        ).json()

        assert second["id"] == first["id"]
        assert second["is_new"] is False

    def test_login_fails_when_credential_not_committed(self, sqlite_client, monkeypatch):
        fail_commits(monkeypatch)

        response = sqlite_client.get("/oauth/login", follow_redirects=False)

        assert response.status_code == 500
        assert "disk I/O error" in response.json()["detail"]
