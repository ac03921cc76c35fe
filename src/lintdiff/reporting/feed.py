# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Structured result feed emitted for every new issue."""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Final, Protocol

from pydantic import BaseModel, ConfigDict, Field

from ..core.location import issue_location
from ..core.models import Issue
from .links import DEFAULT_GUIDELINES_URL, blob_href, rule_doc_url

RESULT_RECORD_TYPE: Final[str] = "Result"
NEW_PATH_TAG: Final[str] = "New"


class ResultPath(BaseModel):
    """Tagged link pointing at the location of a finding."""

    model_config = ConfigDict(frozen=True)

    tag: str
    path: str


class ResultRecord(BaseModel):
    """Lint result record describing one new issue."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    record_type: str = Field(default=RESULT_RECORD_TYPE, alias="type", frozen=True)
    level: str
    code: str
    rule_id: str = Field(alias="id")
    message: str
    doc_url: str = Field(alias="docUrl")
    group_name: str = Field(alias="groupName")
    time: datetime
    paths: tuple[ResultPath, ...] = Field(default_factory=tuple)
    extra: dict[str, str | int | None] = Field(default_factory=dict)

    def to_payload(self) -> dict[str, object]:
        """Return the JSON-compatible mapping using wire field names."""

        return self.model_dump(mode="json", by_alias=True)


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class LintResultComposer:
    """Compose :class:`ResultRecord` instances from issues.

    Attributes:
        blob_base_url: Base URL used to link findings to the pull request head.
        guidelines_url: Rule documentation page.
        clock: Callable returning the timestamp recorded on each record.
    """

    blob_base_url: str | None = None
    guidelines_url: str = DEFAULT_GUIDELINES_URL
    clock: Callable[[], datetime] = field(default=_utc_now)

    def compose(self, issue: Issue) -> ResultRecord:
        """Return the feed record describing ``issue``.

        Args:
            issue: New issue to describe.

        Returns:
            ResultRecord: Record tagged with the ``Result`` type marker.
        """

        location = issue_location(issue)
        href = f"{blob_href(location.file_path, self.blob_base_url)}#L{location.line_number}"
        return ResultRecord(
            level=(issue.issue_type or "").lower(),
            code=issue.code or "",
            rule_id=issue.rule_id or "",
            message=issue.message or "",
            doc_url=rule_doc_url(issue.rule_id or "", self.guidelines_url),
            group_name=issue.validation_category or "",
            time=self.clock(),
            paths=(ResultPath(tag=NEW_PATH_TAG, path=href),),
            extra={
                "jsonref": issue.jsonref,
                "providerNamespace": issue.provider_namespace,
                "resourceType": issue.resource_type,
                "sourceCount": len(issue.sources),
            },
        )


class ResultFeedSink(Protocol):
    """Append-only destination receiving one feed line per processed file."""

    def append(self, records: Sequence[ResultRecord]) -> None:
        """Append the records produced for one file."""


def encode_feed_line(records: Sequence[ResultRecord]) -> str:
    """Return the single-line JSON array encoding ``records``."""

    return json.dumps([record.to_payload() for record in records])


@dataclass(slots=True)
class JsonLinesFeedSink:
    """Append feed lines to a JSON-lines log file."""

    path: Path

    def append(self, records: Sequence[ResultRecord]) -> None:
        """Append ``records`` as one JSON line.

        Args:
            records: Records produced for a single file, possibly empty.
        """

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(encode_feed_line(records) + "\n")


__all__ = [
    "NEW_PATH_TAG",
    "RESULT_RECORD_TYPE",
    "JsonLinesFeedSink",
    "LintResultComposer",
    "ResultFeedSink",
    "ResultPath",
    "ResultRecord",
    "encode_feed_line",
]
