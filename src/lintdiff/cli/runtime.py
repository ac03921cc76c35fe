# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Execution of a complete lint diff run on behalf of the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from ..config import ConfigError, DiffSettings
from ..core.errors import DiffInputError
from ..diffing.aggregator import DiffRun, run_diff
from ..diffing.loader import load_diff_input
from ..posting import CommentPoster, publish_report
from ..reporting.console import describe_file_diff
from ..reporting.feed import JsonLinesFeedSink, LintResultComposer
from ..reporting.markdown import ReportContext
from ..reporting.output import (
    EXIT_RUN_FAILED,
    StructuredOutput,
    build_failure_output,
    build_output,
    exit_code_for,
)
from .shared import CLIError, CLILogger

CONFIG_ERROR_EXIT: Final[int] = 2
_FILE_SEPARATOR: Final[str] = "-----------------------------------------\n"


@dataclass(slots=True)
class RunRequest:
    """Inputs of a single CLI run.

    Attributes:
        settings: Resolved configuration.
        output_json: Optional file receiving the structured output.
        poster: Optional collaborator posting the Markdown report.
    """

    settings: DiffSettings
    output_json: Path | None = None
    poster: CommentPoster | None = None


def _emit_output(output: StructuredOutput, request: RunRequest, logger: CLILogger) -> None:
    logger.echo("---output")
    logger.echo(output.to_json())
    logger.echo("---")
    if request.output_json is not None:
        request.output_json.parent.mkdir(parents=True, exist_ok=True)
        request.output_json.write_text(output.to_json(), encoding="utf-8")


def _report_input_failure(exc: DiffInputError, request: RunRequest, logger: CLILogger) -> int:
    logger.fail(str(exc))
    if exc.content is not None:
        logger.echo("File content:")
        logger.echo(exc.content)
    context = ReportContext.from_settings(request.settings)
    _emit_output(build_failure_output(context), request, logger)
    return EXIT_RUN_FAILED


def _diff(request: RunRequest, input_path: Path, logger: CLILogger) -> DiffRun:
    settings = request.settings
    diff_input = load_diff_input(input_path)
    composer = LintResultComposer(blob_base_url=settings.blob_base_url, guidelines_url=settings.guidelines_url)
    logger.debug(f"input={input_path} files={len(diff_input.files)} pipe_log={settings.pipe_log}")
    run = run_diff(diff_input, sink=JsonLinesFeedSink(settings.pipe_log), composer=composer)
    for file_diff in run.files:
        logger.echo(describe_file_diff(file_diff))
        logger.echo(_FILE_SEPARATOR)
    return run


def execute_run(request: RunRequest, logger: CLILogger) -> int:
    """Diff the configured input, emit every report and return the exit code.

    Args:
        request: Run inputs.
        logger: CLI logger used for user-facing output.

    Returns:
        int: ``0`` without new errors, ``1`` with new errors or unreadable input.

    Raises:
        CLIError: If the input location cannot be derived from the configuration.
    """

    try:
        input_path = request.settings.input_path
    except ConfigError as exc:
        raise CLIError(str(exc), exit_code=CONFIG_ERROR_EXIT) from exc

    logger.section("Linter Diff Results")
    logger.info(f"Reading diff results from {input_path}")
    try:
        run = _diff(request, input_path, logger)
    except DiffInputError as exc:
        return _report_input_failure(exc, request, logger)

    output = build_output(run, ReportContext.from_settings(request.settings))
    _emit_output(output, request, logger)

    if request.poster is not None:
        target = publish_report(request.settings, output, request.poster)
        if target is None:
            slug = request.settings.repo_slug or "<unset>"
            logger.warn(f"Report not posted: repository {slug} is not a posting target")
        else:
            logger.ok(f"Report posted for {target.slug}#{target.pull_request_number}")

    totals = run.totals
    exit_code = exit_code_for(totals)
    if exit_code:
        logger.fail(f"{output.title}: new errors were introduced")
    else:
        logger.ok(output.title)
    return exit_code


__all__ = ["CONFIG_ERROR_EXIT", "RunRequest", "execute_run"]
