# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Issue diffing engine: matching, classification and aggregation."""

from __future__ import annotations

from .aggregator import DiffRun, FileDiff, RunTotals, run_diff
from .classifier import BUCKETS, Bucket, FileClassification, bucket_for, classify_file, partition_issues
from .loader import load_diff_input, parse_diff_input
from .matcher import MatchResult, find_match, is_existing, issues_match, split_new_existing
from .ordering import sort_issues

__all__ = [
    "BUCKETS",
    "Bucket",
    "DiffRun",
    "FileClassification",
    "FileDiff",
    "MatchResult",
    "RunTotals",
    "bucket_for",
    "classify_file",
    "find_match",
    "is_existing",
    "issues_match",
    "load_diff_input",
    "parse_diff_input",
    "partition_issues",
    "run_diff",
    "sort_issues",
    "split_new_existing",
]
