"""CLI entrypoint: list the oldest open issues of a GitHub project as a table.

    usage: issues <user> <project> [ count | 4 ]
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import NoReturn

from pydantic import ValidationError

from github_issues.config import IssuesSettings
from github_issues.github.client import GitHubIssuesClient
from github_issues.logging import configure_logging
from github_issues.processing import ExitRequest, decode_response, sort_into_asc_order, take
from github_issues.table_formatter import print_table_for_columns

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 4
DEFAULT_COLUMNS: tuple[str, ...] = ("number", "created_at", "title")
USAGE = f"usage: issues <user> <project> [ count | {DEFAULT_COUNT} ]"

_COUNT_PATTERN = re.compile(r"[+-]?[0-9]+")


class Help(Enum):
    """Sentinel returned by `parse_args` when usage should be shown."""

    HELP = "help"


HELP = Help.HELP


@dataclass(frozen=True, slots=True)
class Request:
    user: str
    project: str
    count: int = DEFAULT_COUNT
    columns: tuple[str, ...] = DEFAULT_COLUMNS


class _UsageError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting."""

    def error(self, message: str) -> NoReturn:
        raise _UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="issues", add_help=False, allow_abbrev=False)
    parser.add_argument("-h", "--help", action="store_true", dest="help")
    parser.add_argument("positionals", nargs="*")
    return parser


def _parse_count(token: str) -> int:
    if not _COUNT_PATTERN.fullmatch(token):
        raise _UsageError(f"count must be an integer: {token!r}")
    try:
        count = int(token)
    except ValueError as e:
        # Digit strings beyond the interpreter's int conversion limit.
        raise _UsageError(f"count is too large: {token[:20]}...") from e
    if abs(count) > sys.maxsize:
        raise _UsageError(f"count is too large: {token}")
    return count


def parse_args(argv: Sequence[str]) -> Request | Help:
    """Interpret command-line tokens.

    `-h` / `--help` anywhere yields `HELP`. Otherwise a GitHub user, a project
    and optionally the number of issues to show are expected; anything else
    (wrong arity, non-integer count) also yields `HELP`. Unknown switches are
    ignored, but they never take a value: in `--limit 5 user project` the `5`
    counts as a positional, so the three positionals fail as a count and the
    result is `HELP`.
    """

    try:
        args, _unknown = build_parser().parse_known_intermixed_args(list(argv))
        if args.help:
            return HELP

        arity = len(args.positionals)
        if arity == 3:
            user, project, count_token = args.positionals
            return Request(user=user, project=project, count=_parse_count(count_token))
        if arity == 2:
            user, project = args.positionals
            return Request(user=user, project=project)
    except _UsageError:
        return HELP
    return HELP


def process(parsed: Request | Help, *, client: GitHubIssuesClient | None = None) -> ExitRequest:
    """Run the pipeline for a parsed request.

    For `HELP`, print usage. For a `Request`: fetch, decode, sort oldest
    first, keep `count` issues and print them as a table. A failed fetch ends
    with exit code 2 and a diagnostic.
    """

    if isinstance(parsed, Help):
        print(USAGE)
        return ExitRequest(code=0)

    owns_client = client is None
    github = client if client is not None else GitHubIssuesClient()
    try:
        outcome = github.fetch(parsed.user, parsed.project)
    finally:
        if owns_client:
            github.close()

    decoded = decode_response(outcome)
    if isinstance(decoded, ExitRequest):
        return decoded

    issues = take(sort_into_asc_order(decoded), parsed.count)
    print_table_for_columns(issues, parsed.columns)
    return ExitRequest(code=0)


def run(argv: Sequence[str], *, client: GitHubIssuesClient | None = None) -> ExitRequest:
    return process(parse_args(argv), client=client)


def _finish(result: ExitRequest) -> int:
    if result.message:
        print(result.message, file=sys.stderr)
    return result.code


def main(argv: list[str] | None = None) -> int:
    parsed = parse_args(sys.argv[1:] if argv is None else argv)
    if isinstance(parsed, Help):
        return _finish(process(parsed))

    try:
        settings = IssuesSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 1

    configure_logging(settings.log_level)

    github = GitHubIssuesClient(
        base_url=settings.github_base_url,
        timeout=settings.request_timeout,
        user_agent=settings.user_agent,
    )
    try:
        return _finish(process(parsed, client=github))
    except Exception:
        logger.exception("Command failed", extra={"user": parsed.user, "project": parsed.project})
        return 1
    finally:
        github.close()


if __name__ == "__main__":
    raise SystemExit(main())
