"""GitHub issues table.

A small CLI that fetches the open issues of a GitHub project and prints the
oldest few as an aligned text table.
"""

__version__ = "0.1.0"

from github_issues.config import IssuesSettings

__all__ = ["__version__", "IssuesSettings"]
