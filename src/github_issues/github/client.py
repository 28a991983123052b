"""GitHub REST client for listing a project's issues.

A fetch never raises for remote problems: the result is a `FetchOutcome`,
either `Success` carrying the decoded issues or `Failure` carrying the error
payload, so callers can branch on the outcome explicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

logger = logging.getLogger(__name__)

Issue = dict[str, Any]


@dataclass(frozen=True, slots=True)
class Success:
    """The remote returned a list of issues."""

    issues: list[Issue]


@dataclass(frozen=True, slots=True)
class Failure:
    """The fetch failed; `error` is the remote error body or a synthesized one."""

    error: dict[str, Any]


FetchOutcome = Success | Failure

MALFORMED_BODY_MESSAGE = "Malformed response body"


class GitHubIssuesClient:
    """Thin wrapper around a `requests.Session` for the issues endpoint."""

    def __init__(
        self,
        *,
        base_url: str = "https://api.github.com",
        timeout: float = 30.0,
        user_agent: str = "github-issues-table",
        session: requests.Session | None = None,
    ) -> None:
        self._rest_base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": user_agent,
            }
        )

    def issues_url(self, user: str, project: str) -> str:
        return f"{self._rest_base_url}/repos/{user.strip('/')}/{project.strip('/')}/issues"

    def fetch(self, user: str, project: str) -> FetchOutcome:
        """Fetch the open issues of `user/project` with a single GET.

        Returns:
            `Success` with the decoded issue list, or `Failure` with an error
            mapping that carries a `message` whenever one could be determined.
        """

        url = self.issues_url(user, project)
        logger.debug("Fetching issues", extra={"url": url})

        try:
            resp = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as e:
            logger.warning("Issues request failed", extra={"url": url, "error": str(e)})
            return Failure({"message": str(e) or type(e).__name__})

        if not resp.ok:
            logger.warning(
                "Issues request returned an error status",
                extra={"url": url, "status_code": resp.status_code},
            )
            return Failure(self._error_payload(resp))

        try:
            payload = resp.json()
        except ValueError:
            logger.warning("Issues response is not valid JSON", extra={"url": url})
            return Failure({"message": MALFORMED_BODY_MESSAGE})

        if not isinstance(payload, list) or not all(isinstance(p, dict) for p in payload):
            logger.warning("Issues response is not a list of objects", extra={"url": url})
            return Failure({"message": MALFORMED_BODY_MESSAGE})

        logger.info("Issues fetched", extra={"url": url, "count": len(payload)})
        return Success(payload)

    @staticmethod
    def _error_payload(resp: requests.Response) -> dict[str, Any]:
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            return body
        return {"message": f"HTTP {resp.status_code} {resp.reason or ''}".rstrip()}

    def close(self) -> None:
        self._session.close()
