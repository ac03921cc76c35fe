# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import pytest

from lintdiff.core.models import Issue
from lintdiff.reporting.feed import ResultRecord

IssueFactory = Callable[..., Issue]

_DEFAULT_ISSUE: dict[str, Any] = {
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


@pytest.fixture
def make_issue() -> IssueFactory:
    """Return a factory building issues from wire-format keyword overrides."""

    def _factory(**overrides: Any) -> Issue:
        payload = {**_DEFAULT_ISSUE, **overrides}
        return Issue.model_validate(payload)

    return _factory


@pytest.fixture(autouse=True)
def _clear_ci_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CI variables of the host from leaking into configuration tests."""

    for variable in (
        "TRAVIS_PULL_REQUEST",
        "TRAVIS_BRANCH",
        "TRAVIS_REPO_SLUG",
        "TRAVIS_PULL_REQUEST_SLUG",
        "TRAVIS_PULL_REQUEST_SHA",
        "TRAVIS_JOB_ID",
        "LINTDIFF_LOG_DIR",
        "LINTDIFF_PIPE_LOG",
        "LINTDIFF_TARGET_BRANCH",
    ):
        monkeypatch.delenv(variable, raising=False)


class ListFeedSink:
    """In-memory result feed sink used by tests."""

    def __init__(self) -> None:
        self.lines: list[list[ResultRecord]] = []

    def append(self, records: Sequence[ResultRecord]) -> None:
        self.lines.append(list(records))


@pytest.fixture
def feed_sink() -> ListFeedSink:
    """Return an empty in-memory feed sink."""

    return ListFeedSink()
