# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity vocabulary for linter issues."""

from __future__ import annotations

from enum import Enum
from typing import Final


class IssueSeverity(str, Enum):
    """Severities tracked by the diff engine."""

    ERROR = "error"
    WARNING = "warning"

    @property
    def label(self) -> str:
        """Return the capitalised label used in reports (``Error``/``Warning``)."""

        return self.value.capitalize()


_SEVERITY_BY_TYPE: Final[dict[str, IssueSeverity]] = {member.value: member for member in IssueSeverity}


def severity_for_type(issue_type: str | None) -> IssueSeverity | None:
    """Map a raw issue ``type`` onto :class:`IssueSeverity`.

    Args:
        issue_type: Type string reported by the linter, compared case-insensitively.

    Returns:
        IssueSeverity | None: Matching severity, or ``None`` when the type is
        missing or not one of ``error``/``warning``.
    """

    if issue_type is None:
        return None
    return _SEVERITY_BY_TYPE.get(issue_type.lower())
