"""Test configuration and fixtures."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest
import requests

from github_issues.github.client import GitHubIssuesClient

ResponseFactory = Callable[..., requests.Response]

_SETTINGS_ENV_VARS = (
    "GITHUB_BASE_URL",
    "LOG_LEVEL",
    "ISSUES_REQUEST_TIMEOUT",
    "ISSUES_USER_AGENT",
)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """`configure_logging` replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no settings in the environment."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def make_response() -> ResponseFactory:
    """Build real `requests.Response` objects without touching the network."""

    def _make(status_code: int, body: Any, reason: str = "OK") -> requests.Response:
        resp = requests.Response()
        resp.status_code = status_code
        resp.reason = reason
        resp.encoding = "utf-8"
        resp._content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
        return resp

    return _make


@pytest.fixture
def session() -> Mock:
    """A stand-in for `requests.Session`; tests set `get.return_value`."""
    mock_session = Mock()
    mock_session.headers = {}
    return mock_session


@pytest.fixture
def client(session: Mock) -> GitHubIssuesClient:
    return GitHubIssuesClient(base_url="https://api.github.com", timeout=5.0, session=session)


def _issue(number: int, created_at: str, title: str | None = None) -> dict[str, Any]:
    return {
        "number": number,
        "created_at": created_at,
        "title": title if title is not None else f"Issue {number}",
        "state": "open",
    }


@pytest.fixture
def make_issue() -> Callable[..., dict[str, Any]]:
    return _issue


@pytest.fixture
def ten_issues() -> list[dict[str, Any]]:
    """Ten issues in newest-first order, as GitHub lists them."""
    return [_issue(n, f"2024-01-{n:02d}T12:00:00Z") for n in range(10, 0, -1)]
