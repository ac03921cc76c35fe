# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models and vocabularies shared across lintdiff."""

from __future__ import annotations

from .categories import ValidationFamily, family_for_category
from .errors import DiffInputError, LintDiffError
from .location import IssueLocation, issue_location, normalize_location_ref, parse_location
from .models import DiffInput, FileEntry, Issue
from .severity import IssueSeverity, severity_for_type

__all__ = [
    "DiffInput",
    "DiffInputError",
    "FileEntry",
    "Issue",
    "IssueLocation",
    "IssueSeverity",
    "LintDiffError",
    "ValidationFamily",
    "family_for_category",
    "issue_location",
    "normalize_location_ref",
    "parse_location",
    "severity_for_type",
]
