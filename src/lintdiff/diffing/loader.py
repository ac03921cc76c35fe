# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read and validate the before/after diff document."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from ..core.errors import DiffInputError
from ..core.models import DiffInput


def parse_diff_input(text: str, *, path: Path | None = None) -> DiffInput:
    """Parse diff JSON ``text`` into a :class:`DiffInput`.

    Args:
        text: Raw JSON document.
        path: Source path used in error messages.

    Returns:
        DiffInput: Validated diff document.

    Raises:
        DiffInputError: If the JSON is malformed or does not match the schema.
    """

    try:
        return DiffInput.model_validate_json(text)
    except ValidationError as exc:
        source = str(path) if path is not None else "<text>"
        raise DiffInputError(f"Failed to parse diff results from {source}: {exc}", path=path, content=text) from exc


def load_diff_input(path: Path) -> DiffInput:
    """Read the diff document stored at ``path`` as UTF-8.

    Args:
        path: Location of the diff results file.

    Returns:
        DiffInput: Validated diff document.

    Raises:
        DiffInputError: If the file is missing, unreadable or invalid.
    """

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DiffInputError(f"Failed to read diff results from file {path}: {exc}", path=path) from exc
    return parse_diff_input(text, path=path)


__all__ = ["load_diff_input", "parse_diff_input"]
