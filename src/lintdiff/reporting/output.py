# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Structured summary output and the severity-based exit signal."""

from __future__ import annotations

import json
from typing import Final

from pydantic import BaseModel, ConfigDict

from ..diffing.aggregator import DiffRun, RunTotals
from ..diffing.classifier import BUCKETS
from .links import anchor_name, email_link, icon_for, pluralize
from .markdown import FEEDBACK_ADDRESS, ReportContext, render_report_text

FAILURE_TITLE: Final[str] = "Failed to produce a result"
EXIT_OK: Final[int] = 0
EXIT_NEW_ERRORS: Final[int] = 1
EXIT_RUN_FAILED: Final[int] = 1


class StructuredOutput(BaseModel):
    """Summary consumed by CI check annotations and the comment poster."""

    model_config = ConfigDict(frozen=True)

    title: str
    summary: str
    text: str | None = None

    def to_json(self, *, indent: int | None = 2) -> str:
        """Return the JSON encoding, omitting ``text`` when absent."""

        return json.dumps(self.model_dump(exclude_none=True), indent=indent)


def format_summary_line(issue_type: str, count: int) -> str:
    """Return one summary line, linking to the matching section when ``count`` is positive."""

    line = f"&nbsp;&nbsp;&nbsp;{icon_for(issue_type, count)}&nbsp;&nbsp;&nbsp;"
    label = f"**{count}** new {pluralize(issue_type, count)}"
    if count > 0:
        line += f"[{label}](#user-content-{anchor_name(issue_type)})"
    else:
        line += label
    return line + "\n\n"


def format_title(totals: RunTotals) -> str:
    """Return ``<E> new error(s) / <W> new warning(s)``."""

    errors = totals.new_errors
    warnings = totals.new_warnings
    return f"{errors} new {pluralize('error', errors)} / {warnings} new {pluralize('warning', warnings)}"


def format_summary(totals: RunTotals, target_branch: str) -> str:
    """Return the per-bucket summary introduced by the comparison sentence."""

    summary = f"Compared to the target branch (**{target_branch}**), this pull request introduces:\n\n"
    for bucket in BUCKETS:
        summary += format_summary_line(bucket.label, totals.new_count(bucket))
    return summary


def build_output(run: DiffRun, context: ReportContext) -> StructuredOutput:
    """Assemble the structured summary for a completed run.

    Args:
        run: Completed diff run.
        context: Rendering context.

    Returns:
        StructuredOutput: Title, summary and Markdown body.
    """

    return StructuredOutput(
        title=format_title(run.totals),
        summary=format_summary(run.totals, context.target_branch),
        text=render_report_text(run, context),
    )


def build_failure_output(context: ReportContext) -> StructuredOutput:
    """Return the report emitted when the diff input could not be processed.

    The failure report carries a title and summary only; it never includes a
    Markdown body.

    Args:
        context: Rendering context supplying pull request and job links.

    Returns:
        StructuredOutput: Failure report without ``text``.
    """

    body = "Please examine the failure"
    if context.pull_request_url:
        body += f" in PR {context.pull_request_url}"
    if context.build_output_url:
        body += f"\r\nThe failing job is {context.build_output_url}"
    report_link = email_link("report this failure", FEEDBACK_ADDRESS, "Failure | AutoRest Linter Diff Tool", body)
    summary = (
        "The Linter Diff tool failed to produce a result. Work with your reviewer to examine the lint results "
        f"manually before merging.\n\nPlease {report_link}!"
    )
    return StructuredOutput(title=FAILURE_TITLE, summary=summary)


def exit_code_for(totals: RunTotals) -> int:
    """Return the process exit code: non-zero only when new errors were introduced."""

    return EXIT_NEW_ERRORS if totals.new_errors > 0 else EXIT_OK


__all__ = [
    "EXIT_NEW_ERRORS",
    "EXIT_OK",
    "EXIT_RUN_FAILED",
    "FAILURE_TITLE",
    "StructuredOutput",
    "build_failure_output",
    "build_output",
    "exit_code_for",
    "format_summary",
    "format_summary_line",
    "format_title",
]
