# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model for a lint diff run."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.errors import LintDiffError
from ..reporting.links import DEFAULT_GUIDELINES_URL

DEFAULT_LOG_DIR: Final[Path] = Path("output")
DEFAULT_PIPE_LOG: Final[Path] = Path("pipe.log")
DEFAULT_TARGET_BRANCH: Final[str] = "master"
_NOT_A_PULL_REQUEST: Final[frozenset[str]] = frozenset({"", "false"})


class ConfigError(LintDiffError):
    """Raised when configuration input is invalid."""


class DiffSettings(BaseModel):
    """Resolved settings for one diff run.

    CI identifiers are optional; links that depend on them are omitted when
    they are missing.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    pull_request_number: int | None = None
    target_branch: str = DEFAULT_TARGET_BRANCH
    repo_slug: str | None = None
    pull_request_slug: str | None = None
    pull_request_sha: str | None = None
    job_id: str | None = None
    log_dir: Path = DEFAULT_LOG_DIR
    input_file: Path | None = None
    pipe_log: Path = DEFAULT_PIPE_LOG
    max_text_length: int = Field(default=65535, gt=0)
    guidelines_url: str = DEFAULT_GUIDELINES_URL
    organization: str = "Azure"
    posting_suffix: str = "-pr"
    github_url: str = "https://github.com"
    build_url: str = "https://travis-ci.org"

    @field_validator("pull_request_number", mode="before")
    @classmethod
    def _coerce_pull_request(cls, value: object) -> object:
        """Treat Travis' ``false`` marker for non-PR builds as an unset number.

        Args:
            value: Raw pull request value.

        Returns:
            object: ``None`` for non-PR markers, otherwise the original value.
        """

        if isinstance(value, str) and value.strip().lower() in _NOT_A_PULL_REQUEST:
            return None
        return value

    @property
    def input_path(self) -> Path:
        """Return the diff results file (``<log_dir>/<pr>.json`` unless overridden).

        Raises:
            ConfigError: If neither an explicit input nor a pull request number is set.
        """

        if self.input_file is not None:
            return self.input_file
        if self.pull_request_number is None:
            raise ConfigError("No pull request number configured; pass --input or --pr")
        return self.log_dir / f"{self.pull_request_number}.json"

    @property
    def blob_base_url(self) -> str | None:
        """Return the URL prefix for files at the pull request head commit."""

        slug = self.pull_request_slug or self.repo_slug
        if not slug or not self.pull_request_sha:
            return None
        return f"{self.github_url}/{slug}/blob/{self.pull_request_sha}"

    @property
    def build_output_url(self) -> str | None:
        """Return the CI job URL when the slug and job id are known."""

        if not self.repo_slug or not self.job_id:
            return None
        return f"{self.build_url}/{self.repo_slug}/jobs/{self.job_id}"

    @property
    def pull_request_url(self) -> str | None:
        """Return the pull request URL when the slug and number are known."""

        if not self.repo_slug or self.pull_request_number is None:
            return None
        return f"{self.github_url}/{self.repo_slug}/pull/{self.pull_request_number}"


__all__ = ["ConfigError", "DiffSettings"]
