# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Link and label helpers shared by the Markdown report and the result feed."""

from __future__ import annotations

import posixpath
import re
from typing import Final
from urllib.parse import quote

DEFAULT_GUIDELINES_URL: Final[str] = (
    "https://github.com/Azure/azure-rest-api-specs/blob/master/documentation/openapi-authoring-automated-guidelines.md"
)
# Characters left untouched by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE: Final[str] = "-_.!~*'()"
_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s")


def blob_href(file_path: str, blob_base_url: str | None) -> str:
    """Return the browsable URL of ``file_path`` under ``blob_base_url``.

    Args:
        file_path: Repository-relative file path.
        blob_base_url: Base URL of the pull request head, ``None`` when unknown.

    Returns:
        str: Absolute URL, or ``file_path`` itself when no base is configured.
    """

    if not blob_base_url:
        return file_path
    return f"{blob_base_url.rstrip('/')}/{file_path.lstrip('/')}"


def rule_doc_url(rule_id: str, guidelines_url: str = DEFAULT_GUIDELINES_URL) -> str:
    """Return the documentation anchor for ``rule_id``."""

    return f"{guidelines_url}#{rule_id}"


def short_name(file_path: str) -> str:
    """Return ``parent/<strong>name</strong>`` with a zero-width break after the slash."""

    parent = posixpath.basename(posixpath.dirname(file_path))
    return f"{parent}/&#8203;<strong>{posixpath.basename(file_path)}</strong>"


def anchor_name(issue_type: str) -> str:
    """Return the anchor slug used for an issue type label (``SDK Error`` -> ``SDK-Errors``)."""

    return f"{_WHITESPACE.sub('-', issue_type)}s"


def email_link(title: str, address: str, subject: str = "", body: str = "") -> str:
    """Return an HTML ``mailto`` anchor with url-encoded subject and body.

    Args:
        title: Visible link text.
        address: Recipient address.
        subject: Optional mail subject.
        body: Optional mail body.

    Returns:
        str: HTML anchor element.
    """

    link = f"<a href='mailto:{address}"
    separator = "?"
    if subject:
        link += f"{separator}subject={quote(subject, safe=_URI_COMPONENT_SAFE)}"
        separator = "&"
    if body:
        link += f"{separator}body={quote(body, safe=_URI_COMPONENT_SAFE)}"
    return f"{link}'>{title}</a>"


def pluralize(word: str, count: int) -> str:
    """Return ``word`` with an ``s`` suffix unless ``count`` is exactly one."""

    return word if count == 1 else f"{word}s"


def icon_for(issue_type: str, count: int | None = None) -> str:
    """Return the GitHub emoji shortcode for an issue type.

    Args:
        issue_type: Label such as ``SDK Error`` or ``ARM Warning``.
        count: Optional count; zero renders a check mark.

    Returns:
        str: Emoji shortcode.
    """

    if count == 0:
        return ":white_check_mark:"
    if "error" in issue_type.lower():
        return ":x:"
    return ":warning:"


__all__ = [
    "DEFAULT_GUIDELINES_URL",
    "anchor_name",
    "blob_href",
    "email_link",
    "icon_for",
    "pluralize",
    "rule_doc_url",
    "short_name",
]
