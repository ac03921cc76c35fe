# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Stable ordering for issue tables."""

from __future__ import annotations

from collections.abc import Iterable

from ..core.location import issue_location
from ..core.models import Issue


def issue_sort_key(issue: Issue) -> tuple[str, int, str]:
    """Return the ``(file path, line, rule id)`` key used to order tables."""

    location = issue_location(issue)
    return location.file_path, location.line_number, issue.rule_id or ""


def sort_issues(issues: Iterable[Issue]) -> list[Issue]:
    """Return ``issues`` ordered by display path, line number and rule id.

    Args:
        issues: Issues to order.

    Returns:
        list[Issue]: New list sorted with a stable sort.
    """

    return sorted(issues, key=issue_sort_key)


__all__ = ["issue_sort_key", "sort_issues"]
