# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the classifier over every file entry and accumulate run totals."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field

from ..core.categories import ValidationFamily
from ..core.models import DiffInput, Issue
from ..core.severity import IssueSeverity
from ..reporting.feed import LintResultComposer, ResultFeedSink, ResultRecord
from .classifier import BUCKETS, Bucket, FileClassification, classify_file
from .ordering import sort_issues

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FileDiff:
    """Diff outcome for one configuration file.

    Attributes:
        file_name: Key of the file entry in the diff input.
        classification: Raw bucketed classification.
        new: Sorted new issues per bucket.
        existing: Sorted existing issues per bucket.
    """

    file_name: str
    classification: FileClassification
    new: dict[Bucket, list[Issue]]
    existing: dict[Bucket, list[Issue]]

    @classmethod
    def from_classification(cls, file_name: str, classification: FileClassification) -> FileDiff:
        """Build a :class:`FileDiff` with tables sorted for display."""

        return cls(
            file_name=file_name,
            classification=classification,
            new={bucket: sort_issues(classification.new(bucket)) for bucket in BUCKETS},
            existing={bucket: sort_issues(classification.existing(bucket)) for bucket in BUCKETS},
        )

    def new_issues(self) -> list[Issue]:
        """Return new issues flattened in SDK Error, ARM Error, SDK Warning, ARM Warning order."""

        return [issue for bucket in BUCKETS for issue in self.new[bucket]]

    def has_issues(self, family: ValidationFamily) -> bool:
        """Return whether any new or existing issue belongs to ``family``."""

        return any(self.new[bucket] or self.existing[bucket] for bucket in BUCKETS if bucket.family is family)


@dataclass(slots=True)
class RunTotals:
    """New and existing issue counts per bucket across the whole run."""

    new: Counter[Bucket] = field(default_factory=Counter)
    existing: Counter[Bucket] = field(default_factory=Counter)

    def add(self, file_diff: FileDiff) -> None:
        """Accumulate the counts contributed by ``file_diff``."""

        for bucket in BUCKETS:
            self.new[bucket] += len(file_diff.new[bucket])
            self.existing[bucket] += len(file_diff.existing[bucket])

    def new_count(self, bucket: Bucket) -> int:
        """Return the number of new issues recorded for ``bucket``."""

        return self.new[bucket]

    def _new_by_severity(self, severity: IssueSeverity) -> int:
        return sum(self.new[bucket] for bucket in BUCKETS if bucket.severity is severity)

    @property
    def new_errors(self) -> int:
        """Return the total of new SDK and ARM errors."""

        return self._new_by_severity(IssueSeverity.ERROR)

    @property
    def new_warnings(self) -> int:
        """Return the total of new SDK and ARM warnings."""

        return self._new_by_severity(IssueSeverity.WARNING)


@dataclass(slots=True)
class DiffRun:
    """Run-scoped aggregate state owned by a single diff invocation."""

    totals: RunTotals = field(default_factory=RunTotals)
    files: list[FileDiff] = field(default_factory=list)

    def add(self, file_diff: FileDiff) -> None:
        """Record ``file_diff`` and fold its counts into the totals."""

        self.files.append(file_diff)
        self.totals.add(file_diff)

    @property
    def has_new_errors(self) -> bool:
        """Return whether the run should signal failure."""

        return self.totals.new_errors > 0


def run_diff(
    diff_input: DiffInput,
    *,
    sink: ResultFeedSink | None = None,
    composer: LintResultComposer | None = None,
) -> DiffRun:
    """Diff every file entry of ``diff_input`` in file-name order.

    Every file is processed; there is no early exit when errors are found.
    When ``sink`` is supplied one feed line per file is appended in processing
    order, containing the composed records of that file's new issues.

    Args:
        diff_input: Parsed before/after document.
        sink: Optional append-only destination for the result feed.
        composer: Record composer used for the feed; defaults are used when omitted.

    Returns:
        DiffRun: Aggregated per-file diffs and run totals.
    """

    run = DiffRun()
    active_composer = composer or LintResultComposer()
    for file_name in diff_input.sorted_file_names():
        entry = diff_input.files[file_name]
        file_diff = FileDiff.from_classification(file_name, classify_file(entry.before, entry.after))
        run.add(file_diff)
        LOGGER.debug(
            "file=%s new=%d existing=%d",
            file_name,
            sum(len(issues) for issues in file_diff.new.values()),
            sum(len(issues) for issues in file_diff.existing.values()),
        )
        if sink is not None:
            records: list[ResultRecord] = [active_composer.compose(issue) for issue in file_diff.new_issues()]
            sink.append(records)
    return run


__all__ = ["DiffRun", "FileDiff", "RunTotals", "run_diff"]
