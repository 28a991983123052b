"""Configuration for the issues CLI.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

No authentication is performed, so no token setting exists.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class IssuesSettings(BaseSettings):
    """Settings for the issues CLI.

    Environment variables:
    - GITHUB_BASE_URL         (optional)
    - LOG_LEVEL               (optional)
    - ISSUES_REQUEST_TIMEOUT  (optional)
    - ISSUES_USER_AGENT       (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `IssuesSettings(_env_file=path_to_env)`.
    """

    github_base_url: str = Field(
        default="https://api.github.com",
        validation_alias="GITHUB_BASE_URL",
        description="GitHub API base URL (useful for GitHub Enterprise)",
    )

    log_level: str = Field(
        default="WARNING",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    request_timeout: float = Field(
        default=30.0,
        gt=0,
        validation_alias="ISSUES_REQUEST_TIMEOUT",
        description="Timeout in seconds for the issues request",
    )

    user_agent: str = Field(
        default="github-issues-table",
        validation_alias="ISSUES_USER_AGENT",
        description="User-Agent header sent to GitHub (the API rejects requests without one)",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level
