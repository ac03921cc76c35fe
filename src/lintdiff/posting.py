# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Deployment gate and collaborators for publishing the report as a PR comment."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .config.models import DiffSettings
    from .reporting.output import StructuredOutput


@dataclass(frozen=True, slots=True)
class PostingTarget:
    """Destination of a pull request comment."""

    organization: str
    repository: str
    pull_request_number: int

    @property
    def slug(self) -> str:
        """Return ``organization/repository``."""

        return f"{self.organization}/{self.repository}"


class CommentPoster(Protocol):
    """Collaborator that delivers the Markdown report to a pull request."""

    def post(self, target: PostingTarget, body: str) -> None:
        """Deliver ``body`` to ``target``."""


def resolve_posting_target(settings: DiffSettings) -> PostingTarget | None:
    """Return where the report should be posted, or ``None`` when posting is disabled.

    Posting only happens when the repository slug ends with the configured
    suffix (``-pr`` by default). The repository short name is the second
    segment of the slash-delimited slug.

    Args:
        settings: Resolved settings carrying the repository slug and PR number.

    Returns:
        PostingTarget | None: Comment destination, ``None`` when gated off.
    """

    slug = settings.repo_slug
    if not slug or not slug.endswith(settings.posting_suffix):
        return None
    parts = slug.split("/")
    if len(parts) < 2 or not parts[1]:
        return None
    if settings.pull_request_number is None:
        return None
    return PostingTarget(
        organization=settings.organization,
        repository=parts[1],
        pull_request_number=settings.pull_request_number,
    )


def publish_report(
    settings: DiffSettings,
    output: StructuredOutput,
    poster: CommentPoster,
) -> PostingTarget | None:
    """Post ``output.text`` through ``poster`` when the deployment gate allows it.

    Args:
        settings: Resolved settings used by the gate.
        output: Structured output whose Markdown body is posted.
        poster: Delivery collaborator.

    Returns:
        PostingTarget | None: Target that received the comment, if any.
    """

    target = resolve_posting_target(settings)
    if target is None or output.text is None:
        return None
    poster.post(target, output.text)
    return target


@dataclass(slots=True)
class MarkdownFileCommentPoster:
    """Write the comment body to a file picked up by a later CI step."""

    path: Path

    def post(self, target: PostingTarget, body: str) -> None:
        """Write ``body`` preceded by an HTML comment naming ``target``.

        Args:
            target: Pull request the comment is destined for.
            body: Markdown comment body.
        """

        self.path.parent.mkdir(parents=True, exist_ok=True)
        header = f"<!-- {target.slug}#{target.pull_request_number} -->\n"
        self.path.write_text(header + body, encoding="utf-8")


__all__ = [
    "CommentPoster",
    "MarkdownFileCommentPoster",
    "PostingTarget",
    "publish_report",
    "resolve_posting_target",
]
