# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Partition issues into (family, severity) buckets and split new from existing."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Final, TypeAlias

from ..core.categories import ValidationFamily
from ..core.models import Issue
from ..core.severity import IssueSeverity
from .matcher import MatchResult, split_new_existing

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Bucket:
    """Reporting bucket combining a validation family and a severity."""

    family: ValidationFamily
    severity: IssueSeverity

    @property
    def label(self) -> str:
        """Return the human label, for example ``SDK Error``."""

        return f"{self.family.value} {self.severity.label}"


SDK_ERROR: Final[Bucket] = Bucket(ValidationFamily.SDK, IssueSeverity.ERROR)
ARM_ERROR: Final[Bucket] = Bucket(ValidationFamily.ARM, IssueSeverity.ERROR)
SDK_WARNING: Final[Bucket] = Bucket(ValidationFamily.SDK, IssueSeverity.WARNING)
ARM_WARNING: Final[Bucket] = Bucket(ValidationFamily.ARM, IssueSeverity.WARNING)

# Feed and summary order.
BUCKETS: Final[tuple[Bucket, ...]] = (SDK_ERROR, ARM_ERROR, SDK_WARNING, ARM_WARNING)

BucketMap: TypeAlias = dict[Bucket, list[Issue]]


def bucket_for(issue: Issue) -> Bucket | None:
    """Return the bucket ``issue`` belongs to, or ``None`` when it is dropped.

    Issues with an unrecognised ``type`` and issues from the excluded family
    are filtered out of every bucket.

    Args:
        issue: Issue to classify.

    Returns:
        Bucket | None: Target bucket, ``None`` for filtered issues.
    """

    severity = issue.severity
    if severity is None:
        return None
    family = issue.family
    if not family.reported:
        return None
    return Bucket(family, severity)


def empty_buckets() -> BucketMap:
    """Return a bucket map with an empty list for every reporting bucket."""

    return {bucket: [] for bucket in BUCKETS}


def partition_issues(issues: Iterable[Issue]) -> BucketMap:
    """Group ``issues`` by bucket, preserving input order.

    Args:
        issues: Flat issue list for one snapshot of one file.

    Returns:
        BucketMap: Issues keyed by bucket; every bucket is present.
    """

    buckets = empty_buckets()
    dropped = 0
    for issue in issues:
        bucket = bucket_for(issue)
        if bucket is None:
            dropped += 1
            continue
        buckets[bucket].append(issue)
    if dropped:
        LOGGER.debug("dropped=%d reason=unknown-type-or-excluded-category", dropped)
    return buckets


@dataclass(frozen=True, slots=True)
class FileClassification:
    """Bucketed before/after issues and the new/existing split for one file."""

    before: Mapping[Bucket, Sequence[Issue]]
    after: Mapping[Bucket, Sequence[Issue]]
    matches: Mapping[Bucket, MatchResult]

    def new(self, bucket: Bucket) -> list[Issue]:
        """Return the new issues of ``bucket`` in input order."""

        return list(self.matches[bucket].new)

    def existing(self, bucket: Bucket) -> list[Issue]:
        """Return the existing issues of ``bucket`` in input order."""

        return list(self.matches[bucket].existing)


def classify_file(before: Iterable[Issue], after: Iterable[Issue]) -> FileClassification:
    """Classify the before/after issues reported for a single file.

    Args:
        before: Issues reported on the target branch.
        after: Issues reported for the proposed change.

    Returns:
        FileClassification: Buckets for both snapshots plus the new/existing split.
    """

    before_buckets = partition_issues(before)
    after_buckets = partition_issues(after)
    matches = {bucket: split_new_existing(after_buckets[bucket], before_buckets[bucket]) for bucket in BUCKETS}
    return FileClassification(before=before_buckets, after=after_buckets, matches=matches)


__all__ = [
    "ARM_ERROR",
    "ARM_WARNING",
    "BUCKETS",
    "SDK_ERROR",
    "SDK_WARNING",
    "Bucket",
    "BucketMap",
    "FileClassification",
    "bucket_for",
    "classify_file",
    "empty_buckets",
    "partition_issues",
]
