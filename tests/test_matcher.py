# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for fuzzy issue matching."""

from __future__ import annotations

import pytest

from lintdiff.diffing.matcher import find_match, is_existing, issues_match, split_new_existing


@pytest.mark.parametrize(
    "after_ref",
    [
        "a.json:2:1#/x",
        "a.json:1:9#/x",
        "moved/elsewhere/a.json:300:12#/x",
        "b.json:1:1#/x",
    ],
)
def test_position_and_path_changes_still_match(make_issue, after_ref: str) -> None:
    before = make_issue()
    after = make_issue(jsonref=after_ref)
    assert issues_match(before, after)


@pytest.mark.parametrize(
    "override",
    [
        {"message": "different"},
        {"code": "R2"},
        {"id": "Y"},
        {"validationCategory": "ARMViolation"},
        {"providerNamespace": "q"},
        {"resourceType": "s"},
        {"sources": [1, 2]},
        {"sources": []},
        {"type": "Error"},
        {"jsonref": "a.json:1:1#/y"},
    ],
)
def test_differing_identity_fields_do_not_match(make_issue, override: dict[str, object]) -> None:
    before = make_issue()
    after = make_issue(**override)
    assert not issues_match(before, after)


def test_comparison_is_case_sensitive(make_issue) -> None:
    assert not issues_match(make_issue(message="Message"), make_issue(message="message"))


def test_source_contents_are_ignored(make_issue) -> None:
    before = make_issue(sources=[{"position": {"line": 1}}])
    after = make_issue(sources=[{"position": {"line": 99}}])
    assert issues_match(before, after)


def test_missing_optional_fields_match(make_issue) -> None:
    before = make_issue(providerNamespace=None, resourceType=None)
    after = make_issue(providerNamespace=None, resourceType=None, jsonref="a.json:5:5#/x")
    assert issues_match(before, after)


def test_find_match_returns_first_hit(make_issue) -> None:
    first = make_issue(jsonref="a.json:1:1#/x")
    second = make_issue(jsonref="a.json:7:1#/x")
    candidate = make_issue(jsonref="a.json:9:1#/x")
    assert find_match(candidate, [first, second]) is first


def test_is_existing_against_empty_snapshot(make_issue) -> None:
    assert not is_existing(make_issue(), [])


def test_split_new_existing_preserves_order(make_issue) -> None:
    before = [make_issue()]
    existing = make_issue(jsonref="a.json:2:1#/x")
    new_one = make_issue(message="other")
    new_two = make_issue(id="Z")
    result = split_new_existing([new_one, existing, new_two], before)
    assert result.new == [new_one, new_two]
    assert result.existing == [existing]


def test_one_before_issue_can_match_many(make_issue) -> None:
    before = [make_issue()]
    after = [make_issue(jsonref="a.json:2:1#/x"), make_issue(jsonref="a.json:3:1#/x")]
    result = split_new_existing(after, before)
    assert len(result.existing) == 2
    assert result.new == []
