# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models describing linter issues and the before/after diff input."""

from __future__ import annotations

import json
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from typing_extensions import TypeAliasType

from .categories import ValidationFamily, family_for_category
from .severity import IssueSeverity, severity_for_type

JsonScalar = TypeAliasType("JsonScalar", str | int | float | bool | None)
JsonValue = TypeAliasType("JsonValue", JsonScalar | list["JsonValue"] | dict[str, "JsonValue"])


def _coerce_text(value: object) -> object:
    """Return ``value`` unchanged when it is text or null, else its JSON encoding."""

    if value is None or isinstance(value, str):
        return value
    return json.dumps(value, sort_keys=True)


IssueText = Annotated[str | None, BeforeValidator(_coerce_text)]


class Issue(BaseModel):
    """Immutable linter finding as emitted by the validation tooling.

    Field names follow Python conventions; the camelCase names used on the
    wire (``type``, ``id``, ``validationCategory``, ``providerNamespace``,
    ``resourceType``) are accepted as aliases and used when dumping with
    ``by_alias=True``.

    Text fields accept ``null`` and keep it as ``None``; other non-string
    JSON values are stored as their JSON encoding (``3029`` becomes
    ``"3029"``, ``false`` becomes ``"false"``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    issue_type: IssueText = Field(default=None, alias="type")
    code: IssueText = ""
    rule_id: IssueText = Field(default="", alias="id")
    message: IssueText = ""
    validation_category: IssueText = Field(default="", alias="validationCategory")
    provider_namespace: IssueText = Field(default=None, alias="providerNamespace")
    resource_type: IssueText = Field(default=None, alias="resourceType")
    sources: tuple[JsonValue, ...] = Field(default_factory=tuple)
    jsonref: IssueText = ""

    @property
    def severity(self) -> IssueSeverity | None:
        """Return the recognised severity, or ``None`` for unknown types."""

        return severity_for_type(self.issue_type)

    @property
    def family(self) -> ValidationFamily:
        """Return the validation family derived from ``validation_category``."""

        return family_for_category(self.validation_category)


class FileEntry(BaseModel):
    """Before and after issue lists reported for a single configuration file."""

    model_config = ConfigDict(frozen=True)

    before: tuple[Issue, ...] = Field(default_factory=tuple)
    after: tuple[Issue, ...] = Field(default_factory=tuple)


class DiffInput(BaseModel):
    """Top-level diff document keyed by configuration file name."""

    model_config = ConfigDict(frozen=True)

    files: dict[str, FileEntry]

    def sorted_file_names(self) -> list[str]:
        """Return file names in ascending lexicographic order."""

        return sorted(self.files)


__all__ = ["DiffInput", "FileEntry", "Issue", "IssueText", "JsonScalar", "JsonValue"]
