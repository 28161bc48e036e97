"""Shared fixtures and configuration for tests."""

from __future__ import annotations

import uuid
from typing import Any

import pytest
import respx

from exein_cli.exceptions import AuthError
from exein_cli.types import AuthData

# ==================== MOCK DATA ====================

API_HOST = "api.exein.test"
API_PORT = "8443"
TEST_TOKEN = "test-token-123"


def make_project_dict(
    project_id: str | None = None,
    name: str = "router-fw",
    description: str | None = "Home router firmware",
) -> dict[str, Any]:
    """Create a mock project dictionary."""
    return {
        "id": project_id or str(uuid.uuid4()),
        "name": name,
        "description": description,
        "creation_date": "2026-01-01T00:00:00Z",
        "default": False,
        "info": {"arch": "arm"},
    }


def make_analysis_dict(count: int = 1) -> dict[str, Any]:
    """Create a mock analysis result dictionary."""
    return {
        "count": count,
        "result": [{"cve_id": f"CVE-2024-{1000 + i}", "severity": "high"} for i in range(count)],
    }


# ==================== TEST DOUBLES ====================


class FakeAuthSystem:
    """Auth system whose outcomes are scripted per method.

    Each outcome is either an AuthData to return or an exception to raise.
    Every call is recorded in ``calls``.
    """

    def __init__(
        self,
        logged_in: AuthData | Exception | None = None,
        refresh: AuthData | Exception | None = None,
        login: AuthData | Exception | None = None,
        logout: Exception | None = None,
    ) -> None:
        self._logged_in = logged_in or AuthData(token=TEST_TOKEN)
        self._refresh = refresh or AuthError("No refresh token available")
        self._login = login or AuthError("Invalid user credentials")
        self._logout = logout
        self.calls: list[tuple[Any, ...]] = []

    @staticmethod
    def _outcome(outcome: AuthData | Exception) -> AuthData:
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def logged_in(self) -> AuthData:
        self.calls.append(("logged_in",))
        return self._outcome(self._logged_in)

    async def refresh(self) -> AuthData:
        self.calls.append(("refresh",))
        return self._outcome(self._refresh)

    async def login(self, username: str, password: str) -> AuthData:
        self.calls.append(("login", username, password))
        return self._outcome(self._login)

    async def logout(self) -> None:
        self.calls.append(("logout",))
        if self._logout is not None:
            raise self._logout


def no_prompt() -> tuple[str, str]:
    raise AssertionError("credential prompt must not be shown")


# ==================== FIXTURES ====================


@pytest.fixture
def api_base_url() -> str:
    """Base URL for API mocks."""
    return f"https://{API_HOST}:{API_PORT}"


@pytest.fixture
def fake_auth() -> FakeAuthSystem:
    """Auth system with a valid stored session."""
    return FakeAuthSystem()


@pytest.fixture
def respx_mock():
    """Fixture for respx mocking."""
    with respx.mock(assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def firmware_file(tmp_path):
    """Create a small firmware image on disk."""
    path = tmp_path / "router.bin"
    path.write_bytes(b"\x7fELF firmware bytes")
    return path


@pytest.fixture
def credentials_file(tmp_path):
    """Path for a temporary credentials file (not created)."""
    return tmp_path / ".exein" / "credentials.json"
