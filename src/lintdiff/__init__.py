# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Linter diff engine separating newly introduced findings from existing ones."""

from __future__ import annotations

from .core.models import DiffInput, FileEntry, Issue
from .diffing.aggregator import DiffRun, run_diff

__all__ = ["DiffInput", "DiffRun", "FileEntry", "Issue", "run_diff"]
