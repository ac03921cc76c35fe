# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for run aggregation across files."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

from lintdiff.core.models import DiffInput
from lintdiff.diffing.aggregator import run_diff
from lintdiff.diffing.classifier import ARM_ERROR, ARM_WARNING, BUCKETS, SDK_ERROR, SDK_WARNING
from lintdiff.diffing.loader import parse_diff_input
from lintdiff.reporting.feed import LintResultComposer


def _issue(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "type": "Warning",
        "validationCategory": "SdkViolation",
        "code": "R1",
        "id": "X",
        "message": "m",
        "providerNamespace": "p",
        "resourceType": "r",
        "sources": [1],
        "jsonref": "a.json:1:1#/x",
    }
    payload.update(overrides)
    return payload


def _fixed_composer() -> LintResultComposer:
    return LintResultComposer(clock=lambda: datetime(2025, 1, 1, tzinfo=UTC))


def test_files_processed_in_sorted_order() -> None:
    diff_input = DiffInput.model_validate(
        {
            "files": {
                "b/readme.md": {"before": [], "after": [_issue(type="Error")]},
                "a/readme.md": {"before": [], "after": []},
                "C/readme.md": {"before": [], "after": []},
            }
        }
    )
    run = run_diff(diff_input)
    assert [file_diff.file_name for file_diff in run.files] == ["C/readme.md", "a/readme.md", "b/readme.md"]


def test_totals_sum_across_files() -> None:
    diff_input = DiffInput.model_validate(
        {
            "files": {
                "one.md": {
                    "before": [],
                    "after": [
                        _issue(type="Error"),
                        _issue(type="Error", validationCategory="ARMViolation", id="A1"),
                        _issue(type="Warning", id="W1"),
                    ],
                },
                "two.md": {
                    "before": [_issue(type="Error", validationCategory="ARMViolation", id="A1")],
                    "after": [
                        _issue(type="Error", validationCategory="ARMViolation", id="A1", jsonref="a.json:8:8#/x"),
                        _issue(type="Error", validationCategory="ARMViolation", id="A2"),
                        _issue(type="Warning", validationCategory="ARMViolation", id="W2"),
                    ],
                },
            }
        }
    )
    run = run_diff(diff_input)
    totals = run.totals
    assert totals.new_count(SDK_ERROR) == 1
    assert totals.new_count(ARM_ERROR) == 2
    assert totals.new_count(SDK_WARNING) == 1
    assert totals.new_count(ARM_WARNING) == 1
    assert totals.existing[ARM_ERROR] == 1
    assert totals.new_errors == totals.new_count(SDK_ERROR) + totals.new_count(ARM_ERROR) == 3
    assert totals.new_warnings == 2
    per_file = sum(len(f.new[SDK_ERROR]) + len(f.new[ARM_ERROR]) for f in run.files)
    assert per_file == totals.new_errors
    assert run.has_new_errors


def test_tables_sorted_by_path_line_and_rule() -> None:
    after = [
        _issue(id="B", message="1", jsonref="z.json:5:1#/a"),
        _issue(id="C", message="2", jsonref="a.json:10:1#/b"),
        _issue(id="A", message="3", jsonref="a.json:10:1#/c"),
        _issue(id="D", message="4", jsonref="a.json:2:1#/d"),
    ]
    diff_input = DiffInput.model_validate({"files": {"f": {"before": [], "after": after}}})
    run = run_diff(diff_input)
    ordered = [issue.rule_id for issue in run.files[0].new[SDK_WARNING]]
    assert ordered == ["D", "A", "C", "B"]


def test_feed_line_per_file_in_fixed_bucket_order(feed_sink) -> None:
    after = [
        _issue(type="Warning", validationCategory="ARMViolation", id="ARM-W"),
        _issue(type="Warning", id="SDK-W"),
        _issue(type="Error", validationCategory="ARMViolation", id="ARM-E"),
        _issue(type="Error", id="SDK-E"),
    ]
    diff_input = DiffInput.model_validate(
        {"files": {"x": {"before": [], "after": after}, "y": {"before": [], "after": []}}}
    )
    sink = feed_sink
    run_diff(diff_input, sink=sink, composer=_fixed_composer())
    assert len(sink.lines) == 2
    assert [record.rule_id for record in sink.lines[0]] == ["SDK-E", "ARM-E", "SDK-W", "ARM-W"]
    assert all(record.record_type == "Result" for record in sink.lines[0])
    assert sink.lines[1] == []


def test_no_early_termination_after_errors() -> None:
    diff_input = DiffInput.model_validate(
        {
            "files": {
                "1": {"before": [], "after": [_issue(type="Error")]},
                "2": {"before": [], "after": [_issue(type="Error", id="Y")]},
            }
        }
    )
    run = run_diff(diff_input)
    assert len(run.files) == 2
    assert run.totals.new_errors == 2


def test_excluded_only_file_contributes_nothing() -> None:
    excluded = [_issue(type="Error", validationCategory="RPaaSViolation")]
    diff_input = DiffInput.model_validate({"files": {"rpaas.md": {"before": [], "after": excluded}}})
    run = run_diff(diff_input)
    file_diff = run.files[0]
    assert all(not file_diff.new[bucket] and not file_diff.existing[bucket] for bucket in BUCKETS)
    assert run.totals.new_errors == 0
    assert not run.has_new_errors


def test_runs_do_not_share_state() -> None:
    diff_input = DiffInput.model_validate({"files": {"f": {"before": [], "after": [_issue(type="Error")]}}})
    first = run_diff(diff_input)
    second = run_diff(diff_input)
    assert first.totals.new_errors == second.totals.new_errors == 1
    assert len(second.files) == 1


def test_loosely_typed_fields_do_not_abort_the_run(feed_sink) -> None:
    document = json.dumps(
        {
            "files": {
                "a.md": {
                    "before": [_issue(message=None, code=3029)],
                    "after": [
                        _issue(message=None, code=3029),
                        _issue(type="Error", message=None, resourceType=False, jsonref=None),
                    ],
                },
                "b.md": {"before": [], "after": [_issue(type="Error", id="B1")]},
            }
        }
    )
    run = run_diff(parse_diff_input(document), sink=feed_sink, composer=_fixed_composer())

    assert [file_diff.file_name for file_diff in run.files] == ["a.md", "b.md"]
    first, second = run.files
    assert [issue.code for issue in first.existing[SDK_WARNING]] == ["3029"]
    (broken,) = first.new[SDK_ERROR]
    assert broken.message is None
    assert broken.resource_type == "false"
    assert broken.jsonref is None
    assert [issue.rule_id for issue in second.new[SDK_ERROR]] == ["B1"]
    assert run.totals.new_errors == 2

    record = feed_sink.lines[0][0]
    assert record.message == ""
    assert record.paths[0].path == "#L1"
