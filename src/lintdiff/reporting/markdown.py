# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Markdown report assembly for pull request comments."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, TypeAlias

from ..core.categories import ValidationFamily
from ..core.location import issue_location
from ..core.models import Issue
from ..core.severity import IssueSeverity
from ..diffing.aggregator import DiffRun, FileDiff
from ..diffing.classifier import Bucket
from .links import (
    DEFAULT_GUIDELINES_URL,
    anchor_name,
    blob_href,
    email_link,
    icon_for,
    pluralize,
    rule_doc_url,
    short_name,
)

if TYPE_CHECKING:
    from ..config.models import DiffSettings

FEEDBACK_ADDRESS: Final[str] = "azure-swag-tooling@microsoft.com"
SDK_CONTACT_ADDRESS: Final[str] = "adxsr@microsoft.com"
ARM_CONTACT_ADDRESS: Final[str] = "armrpapireview@microsoft.com"
DEFAULT_MAX_TEXT_LENGTH: Final[int] = 65535

CHANNEL_TITLES: Final[dict[ValidationFamily, str]] = {
    ValidationFamily.SDK: "SDK-related validation Errors / Warnings",
    ValidationFamily.ARM: "ARM-related validation Errors / Warnings",
}
CONTACT_MESSAGES: Final[dict[ValidationFamily, str]] = {
    ValidationFamily.SDK: (
        "These errors are reported by the SDK team's validation tools, reach out to "
        f"[ADX Swagger Reviewers](mailto:{SDK_CONTACT_ADDRESS}) directly for any questions or concerns."
    ),
    ValidationFamily.ARM: (
        "These errors are reported by the ARM team's validation tools, reach out to "
        f"[ARM RP API Review](mailto:{ARM_CONTACT_ADDRESS}) directly for any questions or concerns."
    ),
}
ISSUE_TABLE_HEADER: Final[str] = "\n| | Rule | Location | Message |\n|-|------|----------|---------|\n"

RowFormatter: TypeAlias = Callable[[int, Issue], str]


@dataclass(frozen=True, slots=True)
class ReportContext:
    """Deployment details needed to render links in the report.

    Attributes:
        target_branch: Branch the pull request is compared against.
        blob_base_url: Base URL for file links at the pull request head.
        guidelines_url: Rule documentation page.
        build_output_url: Link to the CI job output, used by fallback messages.
        pull_request_url: Link to the pull request, used by the failure report.
        max_text_length: Largest Markdown body emitted before falling back.
    """

    target_branch: str = "master"
    blob_base_url: str | None = None
    guidelines_url: str = DEFAULT_GUIDELINES_URL
    build_output_url: str | None = None
    pull_request_url: str | None = None
    max_text_length: int = DEFAULT_MAX_TEXT_LENGTH

    @classmethod
    def from_settings(cls, settings: DiffSettings) -> ReportContext:
        """Build a context from resolved :class:`DiffSettings`."""

        return cls(
            target_branch=settings.target_branch,
            blob_base_url=settings.blob_base_url,
            guidelines_url=settings.guidelines_url,
            build_output_url=settings.build_output_url,
            pull_request_url=settings.pull_request_url,
            max_text_length=settings.max_text_length,
        )


def rule_label(issue: Issue) -> str:
    """Return ``<rule id> - <code>``, rendering missing values as empty text."""

    return f"{issue.rule_id or ''} - {issue.code or ''}"


@dataclass(frozen=True, slots=True)
class MarkdownRowFormatter:
    """Render numbered Markdown table rows linking rules and locations."""

    context: ReportContext

    def __call__(self, index: int, issue: Issue) -> str:
        location = issue_location(issue)
        href = blob_href(location.file_path, self.context.blob_base_url)
        rule = f"[{rule_label(issue)}]({rule_doc_url(issue.rule_id or '', self.context.guidelines_url)})"
        where = (
            f"[{short_name(location.file_path)}:{location.line_number}]"
            f'({href}#L{location.line_number} "{location.file_path}")'
        )
        return f"|{index}|{rule}|{where}|{issue.message or ''}|\n"


def plain_row(_index: int, issue: Issue) -> str:
    """Render a plain-text entry for console output."""

    location = issue_location(issue)
    return f"{rule_label(issue)}\n{issue.message or ''}\n  at {location.file_path}:{location.line_number}\n\n"


def render_issue_table(issues: Iterable[Issue], formatter: RowFormatter, header: str = "") -> str:
    """Return ``header`` followed by one formatted row per issue, numbered from one."""

    rows = [formatter(index, issue) for index, issue in enumerate(issues, start=1)]
    return header + "".join(rows)


def _new_block(issue_type: str, issues: Sequence[Issue], context: ReportContext) -> str:
    count = len(issues)
    table = render_issue_table(issues, MarkdownRowFormatter(context), ISSUE_TABLE_HEADER)
    return (
        f'<details><summary><h3 style="display: inline"><a name="{anchor_name(issue_type)}"></a>'
        f"{icon_for(issue_type)} {count} new {pluralize(issue_type, count)}</h3></summary><br>\n\n"
        f"{table}\n</details>"
    )


def _existing_block(issue_type: str, issues: Sequence[Issue], context: ReportContext) -> str:
    count = len(issues)
    table = render_issue_table(issues, MarkdownRowFormatter(context), ISSUE_TABLE_HEADER)
    return (
        f"<details><summary>{icon_for(issue_type)} {count} existing {pluralize(issue_type, count)}</summary><br>\n\n"
        f"{table}\n</details>\n\n"
    )


def render_file_summary(family: ValidationFamily, file_diff: FileDiff, context: ReportContext) -> str:
    """Return the per-file Markdown fragment for one report channel.

    Errors come before warnings and new before existing. A file with no
    issues in ``family`` yields an empty string.

    Args:
        family: Report channel (SDK or ARM).
        file_diff: Diff outcome of the file.
        context: Link rendering context.

    Returns:
        str: Markdown fragment, possibly empty.
    """

    if not file_diff.has_issues(family):
        return ""
    errors = Bucket(family, IssueSeverity.ERROR)
    warnings = Bucket(family, IssueSeverity.WARNING)
    summary = ""
    if file_diff.new[errors]:
        summary += _new_block(errors.label, file_diff.new[errors], context)
    if file_diff.existing[errors]:
        summary += _existing_block(errors.label, file_diff.existing[errors], context)
    if summary:
        summary += "<br>\n\n"
    if file_diff.new[warnings]:
        summary += _new_block(warnings.label, file_diff.new[warnings], context)
    if file_diff.existing[warnings]:
        summary += _existing_block(warnings.label, file_diff.existing[warnings], context)
    header = f"## Config file: [{file_diff.file_name}]({blob_href(file_diff.file_name, context.blob_base_url)})\n"
    return header + summary


def render_channel(family: ValidationFamily, run: DiffRun, context: ReportContext) -> str:
    """Return the Markdown block for ``family`` across every file of ``run``."""

    title = CHANNEL_TITLES[family]
    fragments = "".join(render_file_summary(family, file_diff, context) for file_diff in run.files)
    body = fragments or f"**There were no files containing {title}.**"
    return f"# AutoRest linter results for {title}\n{CONTACT_MESSAGES[family]}\n\n{body}"


def render_footer() -> str:
    """Return the footer appended to every report."""

    guidelines = f"[AutoRest Linter Guidelines]({DEFAULT_GUIDELINES_URL})"
    issues = "[AutoRest Linter Issues](https://github.com/Azure/azure-openapi-validator/issues)"
    feedback = email_link("feedback", FEEDBACK_ADDRESS, "Feedback | AutoRest Linter Diff Tool")
    return f"{guidelines} | {issues} | Send {feedback}\n\nThanks for your co-operation."


def render_too_many_results(context: ReportContext) -> str:
    """Return the fallback body used when the report exceeds the size limit."""

    message = (
        "# Result limit exceeded, check build output\n"
        "The linter diff produced too many results to display here. Please view the build output to see the "
        "results. For help with SDK-related validation Errors / Warnings, reach out to "
        f"[ADX Swagger Reviewers](mailto:{SDK_CONTACT_ADDRESS}). For help with ARM-related validation "
        f"Errors / Warnings, reach out to [ARM RP API Review](mailto:{ARM_CONTACT_ADDRESS}).\n\n"
    )
    if context.build_output_url:
        message += f"### [View Build Output]({context.build_output_url})"
    return message


def render_report_text(run: DiffRun, context: ReportContext) -> str:
    """Return the complete Markdown body, or the fallback when it is too large.

    Args:
        run: Completed diff run.
        context: Link rendering context carrying the size limit.

    Returns:
        str: Markdown report body.
    """

    footer = render_footer()
    sdk_block = render_channel(ValidationFamily.SDK, run, context)
    arm_block = render_channel(ValidationFamily.ARM, run, context)
    text = f"{sdk_block}<br><br>\n\n{arm_block}<br><br>\n\n{footer}"
    if len(text) <= context.max_text_length:
        return text
    return f"{render_too_many_results(context)}<br><br>\n\n{footer}"


__all__ = [
    "CHANNEL_TITLES",
    "ISSUE_TABLE_HEADER",
    "MarkdownRowFormatter",
    "ReportContext",
    "plain_row",
    "rule_label",
    "render_channel",
    "render_file_summary",
    "render_footer",
    "render_issue_table",
    "render_report_text",
    "render_too_many_results",
]
