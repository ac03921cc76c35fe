# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for ``jsonref`` location references attached to issues.

A reference looks like ``<path>.json:<line>:<col>`` optionally followed by a
fragment locating the finding inside the document (for example
``specification/a/b.json:12:5#/paths/~1items``). Trailing segments may be
missing when the linter truncates the reference.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from .models import Issue

_POSITION_PREFIX: Final[re.Pattern[str]] = re.compile(r".*\.json:\d+:\d+")
_DISPLAY_PATTERN: Final[re.Pattern[str]] = re.compile(r"^(?P<path>.*?\.json)(?::(?P<line>\d+))?")
DEFAULT_LINE: Final[int] = 1
_LOCATION_CACHE_SIZE: Final[int] = 8192


@dataclass(frozen=True, slots=True)
class IssueLocation:
    """Display location derived from an issue reference.

    Attributes:
        file_path: File path portion of the reference, empty when absent.
        line_number: One-based line number, ``1`` when absent or unparsable.
    """

    file_path: str
    line_number: int

    def sort_key(self) -> tuple[str, int]:
        """Return the ``(file_path, line_number)`` ordering key."""

        return self.file_path, self.line_number


def normalize_location_ref(jsonref: str | None) -> str:
    """Strip the leading ``<path>.json:<line>:<col>`` segment from ``jsonref``.

    Only the remainder of the reference (typically a JSON pointer fragment) is
    kept so that issues whose file moved or whose line shifted still compare
    equal. The pattern is greedy and applied once, so when several
    ``.json:<line>:<col>`` segments appear everything up to the last one is
    removed. References without a position segment are returned unchanged.

    Args:
        jsonref: Raw reference string, possibly ``None``.

    Returns:
        str: Reference with the file-and-position prefix removed.
    """

    if not jsonref:
        return ""
    return _POSITION_PREFIX.sub("", jsonref, count=1)


def extract_file(jsonref: str | None) -> str | None:
    """Return the file path named by ``jsonref`` or ``None`` when absent."""

    if not jsonref:
        return None
    match = _DISPLAY_PATTERN.match(jsonref)
    if match is None:
        return None
    return match.group("path")


def extract_line(jsonref: str | None) -> int | None:
    """Return the line number named by ``jsonref`` or ``None`` when absent."""

    if not jsonref:
        return None
    match = _DISPLAY_PATTERN.match(jsonref)
    if match is None or match.group("line") is None:
        return None
    return int(match.group("line"))


@lru_cache(maxsize=_LOCATION_CACHE_SIZE)
def parse_location(jsonref: str | None) -> IssueLocation:
    """Return the cached display location for ``jsonref``.

    Missing paths fall back to an empty string and missing or zero line
    numbers fall back to :data:`DEFAULT_LINE`.

    Args:
        jsonref: Raw reference string.

    Returns:
        IssueLocation: Display path and line for the reference.
    """

    return IssueLocation(
        file_path=extract_file(jsonref) or "",
        line_number=extract_line(jsonref) or DEFAULT_LINE,
    )


def issue_location(issue: Issue) -> IssueLocation:
    """Return the memoised display location of ``issue``.

    Args:
        issue: Issue whose reference should be resolved.

    Returns:
        IssueLocation: Display path and line derived from ``issue.jsonref``.
    """

    return parse_location(issue.jsonref)


__all__ = [
    "DEFAULT_LINE",
    "IssueLocation",
    "extract_file",
    "extract_line",
    "issue_location",
    "normalize_location_ref",
    "parse_location",
]
