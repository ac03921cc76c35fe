# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for location reference helpers."""

from __future__ import annotations

import pytest

from lintdiff.core.location import (
    IssueLocation,
    extract_file,
    extract_line,
    issue_location,
    normalize_location_ref,
    parse_location,
)


@pytest.mark.parametrize(
    ("jsonref", "expected"),
    [
        ("a.json:1:1#/x", "#/x"),
        ("specification/foo/bar.json:120:17#/paths/~1items", "#/paths/~1items"),
        ("a.json:1:1", ""),
        ("#/definitions/Foo", "#/definitions/Foo"),
        ("", ""),
        ("a.json:3#/x", "a.json:3#/x"),
        ("a.json:1:2 ref b.json:3:4#/y", "#/y"),
    ],
)
def test_normalize_location_ref(jsonref: str, expected: str) -> None:
    assert normalize_location_ref(jsonref) == expected


def test_normalize_location_ref_handles_none() -> None:
    assert normalize_location_ref(None) == ""


def test_extract_file_and_line() -> None:
    ref = "specification/network/resource-manager/network.json:42:7#/x"
    assert extract_file(ref) == "specification/network/resource-manager/network.json"
    assert extract_line(ref) == 42


def test_truncated_reference_has_no_line() -> None:
    assert extract_file("foo/bar.json") == "foo/bar.json"
    assert extract_line("foo/bar.json") is None


def test_parse_location_defaults() -> None:
    assert parse_location("") == IssueLocation(file_path="", line_number=1)
    assert parse_location("readme.md") == IssueLocation(file_path="", line_number=1)
    assert parse_location("a.json:0:0") == IssueLocation(file_path="a.json", line_number=1)


def test_issue_location_is_memoised(make_issue) -> None:
    issue = make_issue(jsonref="dir/file.json:9:1#/a")
    first = issue_location(issue)
    second = issue_location(issue)
    assert first is second
    assert first.sort_key() == ("dir/file.json", 9)
