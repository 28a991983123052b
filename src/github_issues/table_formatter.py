"""Render issues as a column-aligned text table.

Example output for columns `number, created_at, title`::

    number | created_at           | title
    -------+----------------------+-------------------
    1      | 2024-01-01T00:00:00Z | Fix the flaky test

Cells are joined by " | " and the dash line by "-+-", so every `+` sits
under a `|`. Line breaks inside a value are collapsed to single spaces; each
issue occupies exactly one line.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from typing import Any, TextIO

COLUMN_SEPARATOR = " | "
SEPARATOR_JOINT = "-+-"


def printable(value: Any) -> str:
    if value is None:
        return ""
    return " ".join(str(value).splitlines())


def split_into_columns(rows: Sequence[Mapping[str, Any]], headers: Sequence[str]) -> list[list[str]]:
    """Return one list of cell strings per column; missing fields become ""."""

    return [[printable(row.get(header)) for row in rows] for header in headers]


def widths_of(columns: Sequence[Sequence[str]], headers: Sequence[str]) -> list[int]:
    return [
        max([len(header), *(len(cell) for cell in column)])
        for header, column in zip(headers, columns, strict=True)
    ]


def format_row(cells: Sequence[str], widths: Sequence[int]) -> str:
    return COLUMN_SEPARATOR.join(
        cell.ljust(width) for cell, width in zip(cells, widths, strict=True)
    )


def separator(widths: Sequence[int]) -> str:
    """Dash line whose `+` joints sit under the ` | ` column separators."""

    return SEPARATOR_JOINT.join("-" * width for width in widths)


def render(rows: Sequence[Mapping[str, Any]], headers: Sequence[str]) -> str:
    """Render `rows` as a table with one column per header, in header order.

    The result always has `2 + len(rows)` lines: header, separator, then one
    line per row.
    """

    columns = split_into_columns(rows, headers)
    widths = widths_of(columns, headers)

    lines = [format_row(headers, widths), separator(widths)]
    lines.extend(
        format_row([column[i] for column in columns], widths) for i in range(len(rows))
    )
    return "\n".join(lines)


def print_table_for_columns(
    rows: Sequence[Mapping[str, Any]],
    headers: Sequence[str],
    *,
    file: TextIO | None = None,
) -> None:
    print(render(rows, headers), file=file if file is not None else sys.stdout)
