# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for result feed records and the JSON-lines sink."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path

from lintdiff.reporting.feed import (
    RESULT_RECORD_TYPE,
    JsonLinesFeedSink,
    LintResultComposer,
    encode_feed_line,
)

_NOW = datetime(2025, 3, 4, 5, 6, 7, tzinfo=UTC)


def test_compose_record_fields(make_issue) -> None:
    composer = LintResultComposer(
        blob_base_url="https://github.com/org/repo/blob/abc123",
        guidelines_url="https://docs.example/rules.md",
        clock=lambda: _NOW,
    )
    issue = make_issue(type="Error", id="R4001", code="SomeRule", jsonref="specification/x/a.json:12:3#/paths")
    record = composer.compose(issue)
    payload = record.to_payload()

    assert payload["type"] == RESULT_RECORD_TYPE
    assert payload["level"] == "error"
    assert payload["id"] == "R4001"
    assert payload["code"] == "SomeRule"
    assert payload["message"] == "m"
    assert payload["docUrl"] == "https://docs.example/rules.md#R4001"
    assert payload["groupName"] == "SdkViolation"
    assert payload["paths"] == [{"tag": "New", "path": "https://github.com/org/repo/blob/abc123/specification/x/a.json#L12"}]
    assert payload["extra"]["sourceCount"] == 1
    assert payload["time"].startswith("2025-03-04T05:06:07")


def test_jsonl_sink_appends_one_line_per_call(tmp_path: Path, make_issue) -> None:
    sink = JsonLinesFeedSink(tmp_path / "logs" / "pipe.log")
    composer = LintResultComposer(clock=lambda: _NOW)
    sink.append([composer.compose(make_issue())])
    sink.append([])

    lines = (tmp_path / "logs" / "pipe.log").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    first = json.loads(lines[0])
    assert first[0]["type"] == "Result"
    assert first[0]["paths"][0]["path"] == "a.json#L1"
    assert json.loads(lines[1]) == []


def test_encode_feed_line_is_single_line(make_issue) -> None:
    composer = LintResultComposer(clock=lambda: _NOW)
    line = encode_feed_line([composer.compose(make_issue(message="multi\nline"))])
    assert "\n" not in line
