"""Turn a fetch outcome into the ordered list of issues to display."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from github_issues.github.client import Failure, FetchOutcome, Issue, Success

UNKNOWN_ERROR_MESSAGE = "unknown error"
ERROR_SOURCE = "GitHub"


@dataclass(frozen=True, slots=True)
class ExitRequest:
    """Ask the top-level entrypoint to end the process.

    Components return this instead of exiting themselves; `message`, when set,
    is the diagnostic to write to stderr.
    """

    code: int
    message: str | None = None


def decode_response(outcome: FetchOutcome) -> list[Issue] | ExitRequest:
    """Pass successful issue lists through; turn failures into exit status 2."""

    if isinstance(outcome, Success):
        return outcome.issues
    if isinstance(outcome, Failure):
        message = outcome.error.get("message")
        if message is None or message == "":
            message = UNKNOWN_ERROR_MESSAGE
        return ExitRequest(code=2, message=f"Error fetching from {ERROR_SOURCE}: {message}")
    raise TypeError(f"Unexpected fetch outcome: {outcome!r}")


def _created_at(issue: Issue) -> str:
    value = issue.get("created_at")
    return "" if value is None else str(value)


def sort_into_asc_order(issues: Sequence[Issue]) -> list[Issue]:
    """Sort issues oldest first.

    ISO-8601 timestamps order correctly as strings. The sort is stable, so
    issues created at the same instant keep their input order.
    """

    return sorted(issues, key=_created_at)


def take(issues: Sequence[Issue], count: int) -> list[Issue]:
    """Return the first `count` issues; non-positive counts yield none."""

    if count <= 0:
        return []
    return list(issues[:count])
