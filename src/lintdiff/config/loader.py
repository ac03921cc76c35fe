# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Layered configuration loading (defaults, pyproject, environment, overrides)."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from .models import ConfigError, DiffSettings

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "lintdiff"
ENV_PREFIX: Final[str] = "LINTDIFF_"
_PATH_FIELDS: Final[frozenset[str]] = frozenset({"log_dir", "input_file", "pipe_log"})

CI_ENVIRONMENT: Final[dict[str, str]] = {
    "TRAVIS_PULL_REQUEST": "pull_request_number",
    "TRAVIS_BRANCH": "target_branch",
    "TRAVIS_REPO_SLUG": "repo_slug",
    "TRAVIS_PULL_REQUEST_SLUG": "pull_request_slug",
    "TRAVIS_PULL_REQUEST_SHA": "pull_request_sha",
    "TRAVIS_JOB_ID": "job_id",
}


def load_pyproject_section(root: Path) -> dict[str, Any]:
    """Return the ``[tool.lintdiff]`` table of ``root/pyproject.toml``.

    Keys may use dashes or underscores. Relative paths are resolved against
    ``root``.

    Args:
        root: Project root containing ``pyproject.toml``.

    Returns:
        dict[str, Any]: Configuration fragment, empty when the table is absent.

    Raises:
        ConfigError: If the file cannot be parsed or the table is malformed.
    """

    path = root / PYPROJECT_FILENAME
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    fragment: dict[str, Any] = {}
    for key, value in section.items():
        name = str(key).replace("-", "_")
        if name in _PATH_FIELDS and isinstance(value, str):
            candidate = Path(value)
            value = candidate if candidate.is_absolute() else root / candidate
        fragment[name] = value
    return fragment


def settings_from_environment(env: Mapping[str, str]) -> dict[str, Any]:
    """Collect settings from CI variables and ``LINTDIFF_*`` overrides.

    ``LINTDIFF_*`` variables take precedence over the CI variables. Empty
    values are ignored.

    Args:
        env: Environment mapping to read.

    Returns:
        dict[str, Any]: Configuration fragment.
    """

    fragment: dict[str, Any] = {}
    for variable, name in CI_ENVIRONMENT.items():
        value = env.get(variable)
        if value:
            fragment[name] = value
    for variable, value in env.items():
        if not variable.startswith(ENV_PREFIX) or not value:
            continue
        name = variable.removeprefix(ENV_PREFIX).lower()
        if name in DiffSettings.model_fields:
            fragment[name] = value
    return fragment


def load_settings(
    root: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> DiffSettings:
    """Resolve :class:`DiffSettings` from every configuration layer.

    Args:
        root: Project root holding ``pyproject.toml``; defaults to the working directory.
        env: Environment mapping; defaults to :data:`os.environ`.
        overrides: Explicit values (typically CLI options); ``None`` entries are skipped.

    Returns:
        DiffSettings: Validated settings.

    Raises:
        ConfigError: If any layer holds invalid values.
    """

    merged: dict[str, Any] = {}
    merged.update(load_pyproject_section(root or Path.cwd()))
    merged.update(settings_from_environment(os.environ if env is None else env))
    if overrides:
        merged.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return DiffSettings.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid lintdiff configuration: {exc}") from exc


__all__ = ["CI_ENVIRONMENT", "ENV_PREFIX", "load_pyproject_section", "load_settings", "settings_from_environment"]
