# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fuzzy matching of "after" issues against the "before" snapshot."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from ..core.location import normalize_location_ref
from ..core.models import Issue


@dataclass(slots=True)
class MatchResult:
    """After-issues split into newly introduced and pre-existing findings."""

    new: list[Issue] = field(default_factory=list)
    existing: list[Issue] = field(default_factory=list)


def issues_match(before: Issue, after: Issue) -> bool:
    """Return whether ``after`` is the same finding as ``before``.

    Identity fields must be exactly equal, the ``sources`` lists must have the
    same length and the references must agree once their file-and-position
    prefix is removed. Moving the file or shifting lines therefore keeps the
    finding recognised as pre-existing.

    Args:
        before: Issue from the target-branch snapshot.
        after: Issue from the proposed-change snapshot.

    Returns:
        bool: ``True`` when both issues describe the same finding.
    """

    return (
        before.issue_type == after.issue_type
        and before.code == after.code
        and before.message == after.message
        and before.rule_id == after.rule_id
        and before.validation_category == after.validation_category
        and before.provider_namespace == after.provider_namespace
        and before.resource_type == after.resource_type
        and len(before.sources) == len(after.sources)
        and normalize_location_ref(before.jsonref) == normalize_location_ref(after.jsonref)
    )


def find_match(candidate: Issue, before_issues: Iterable[Issue]) -> Issue | None:
    """Return the first before-issue matching ``candidate``, if any."""

    for before in before_issues:
        if issues_match(before, candidate):
            return before
    return None


def is_existing(candidate: Issue, before_issues: Iterable[Issue]) -> bool:
    """Return whether ``candidate`` already existed in ``before_issues``."""

    return find_match(candidate, before_issues) is not None


def split_new_existing(after_issues: Sequence[Issue], before_issues: Sequence[Issue]) -> MatchResult:
    """Partition ``after_issues`` into new and existing findings.

    Input order is preserved within each partition. A before-issue may match
    several after-issues; matching stops at the first hit.

    Args:
        after_issues: Issues reported for the proposed change.
        before_issues: Issues reported for the target branch, same bucket.

    Returns:
        MatchResult: New and existing issues.
    """

    result = MatchResult()
    for candidate in after_issues:
        if is_existing(candidate, before_issues):
            result.existing.append(candidate)
        else:
            result.new.append(candidate)
    return result


__all__ = ["MatchResult", "find_match", "is_existing", "issues_match", "split_new_existing"]
