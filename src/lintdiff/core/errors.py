# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy for lintdiff."""

from __future__ import annotations

from pathlib import Path


class LintDiffError(Exception):
    """Base class for errors raised by the lintdiff package."""


class DiffInputError(LintDiffError):
    """Raised when the before/after diff input cannot be read or parsed."""

    def __init__(self, message: str, *, path: Path | None = None, content: str | None = None) -> None:
        """Initialise the error with the offending path and raw content.

        Args:
            message: Human-readable description of the failure.
            path: Location of the diff input, when known.
            content: Raw text read before parsing failed, when available.
        """

        super().__init__(message)
        self.path = path
        self.content = content
