"""Shared test fixtures for gafeed.

Provides fixtures for isolated configuration environments, output state,
sessions, and a recording log sink. These fixtures are automatically
discovered by pytest and available to all test modules without explicit
imports.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

import pytest

from gafeed.config import ENV_VARS
from gafeed.output import reset_output
from gafeed.session import Session


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches a reference to sys.stderr at creation time.
    When pytest's capture replaces the stream and the test finishes, the
    cached reference becomes stale. Resetting forces a fresh manager to be
    created on next use.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points XDG_CONFIG_HOME at tmp_path, forces the XDG layout, and clears
    all GAFEED_* environment variables so that tests never see real user
    config.

    Returns:
        The ``gafeed`` config directory (not created).
    """
    monkeypatch.setattr("gafeed.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return tmp_path / "config" / "gafeed"


# ---------------------------------------------------------------------------
# Sessions and access tokens
# ---------------------------------------------------------------------------


class FakeOAuthResponse:
    """Response shape returned by OAuth access tokens: ``status`` + ``body``."""

    def __init__(self, status: int, body: str = "") -> None:
        self.status = status
        self.body = body

    def __repr__(self) -> str:
        return f"<FakeOAuthResponse {self.status}>"


class RecordingAccessToken:
    """Access token that records its calls and returns a canned response."""

    def __init__(self, token: str = "oauth-token", response: Any = None) -> None:
        self.token = token
        self.response = response if response is not None else FakeOAuthResponse(200, "{}")
        self.calls: list[tuple[str, dict[str, str]]] = []

    def get(self, uri: str, headers: Mapping[str, str]) -> Any:
        self.calls.append((uri, dict(headers)))
        return self.response


class ModelessSession:
    """A session reporting neither single-user nor OAuth mode."""

    def is_single_user(self) -> bool:
        return False

    def is_oauth_user(self) -> bool:
        return False

    def legacy_auth_token(self) -> Optional[str]:
        return None

    def oauth_access_token(self) -> None:
        return None


@pytest.fixture
def modeless_session() -> ModelessSession:
    return ModelessSession()


@pytest.fixture
def oauth_response():
    """Factory for OAuth-shaped responses: ``oauth_response(403, body)``."""
    return FakeOAuthResponse


@pytest.fixture
def legacy_session() -> Session:
    """Single-user session holding a legacy auth token."""
    return Session(auth_token="legacy-token")


@pytest.fixture
def access_token() -> RecordingAccessToken:
    return RecordingAccessToken()


@pytest.fixture
def oauth_session(access_token: RecordingAccessToken) -> Session:
    """OAuth session whose access token records every GET."""
    return Session(access_token=access_token)


# ---------------------------------------------------------------------------
# Log sink
# ---------------------------------------------------------------------------


@pytest.fixture
def trace_lines() -> list[str]:
    """List that a ``log_sink=trace_lines.append`` config writes into."""
    return []

