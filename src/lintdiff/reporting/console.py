# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Plain-text per-file breakdown printed to the build log."""

from __future__ import annotations

from ..core.categories import ValidationFamily
from ..core.severity import IssueSeverity
from ..diffing.aggregator import FileDiff
from ..diffing.classifier import ARM_ERROR, ARM_WARNING, SDK_ERROR, SDK_WARNING, Bucket
from .markdown import plain_row, render_issue_table

_REPORTED_FAMILIES = (ValidationFamily.SDK, ValidationFamily.ARM)
_CONSOLE_ORDER = (SDK_ERROR, SDK_WARNING, ARM_ERROR, ARM_WARNING)


def _family_counts(file_diff: FileDiff, family: ValidationFamily) -> list[str]:
    errors = Bucket(family, IssueSeverity.ERROR)
    warnings = Bucket(family, IssueSeverity.WARNING)
    before = file_diff.classification.before
    after = file_diff.classification.after
    name = family.value
    heading = f"{name} Errors/Warnings"
    return [
        heading,
        "=" * len(heading),
        f"Errors:    Before: {len(before[errors])} - After: {len(after[errors])}",
        f"Warnings:  Before: {len(before[warnings])} - After: {len(after[warnings])}",
        f"New {name} Errors: {len(file_diff.new[errors])}",
        f"New {name} Warnings: {len(file_diff.new[warnings])}",
        f"Existing {name} Errors: {len(file_diff.existing[errors])}",
        f"Existing {name} Warnings: {len(file_diff.existing[warnings])}",
        "",
    ]


def describe_file_diff(file_diff: FileDiff) -> str:
    """Return the build-log breakdown for ``file_diff``.

    The breakdown lists before/after counts per family followed by the plain
    tables of potential new issues.

    Args:
        file_diff: Diff outcome of one configuration file.

    Returns:
        str: Multi-line text block.
    """

    lines = [f"Config file: {file_diff.file_name}", ""]
    for family in _REPORTED_FAMILIES:
        lines.extend(_family_counts(file_diff, family))
    for bucket in _CONSOLE_ORDER:
        issues = file_diff.new[bucket]
        if not issues:
            continue
        heading = f"Potential new {bucket.family.value} {bucket.severity.value}s"
        lines.extend([heading, "=" * len(heading), render_issue_table(issues, plain_row)])
    return "\n".join(lines)


__all__ = ["describe_file_diff"]
