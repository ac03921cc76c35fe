# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..config import ConfigError, load_settings
from ..posting import MarkdownFileCommentPoster
from .runtime import CONFIG_ERROR_EXIT, RunRequest, execute_run
from .shared import CLIError, attach_library_logging, build_cli_logger, detach_library_logging

app = typer.Typer(
    name="lintdiff",
    help="Separate newly introduced linter findings from pre-existing ones.",
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Compare before/after linter results for a pull request."""


@app.command("run")
def run_command(
    input_file: Annotated[
        Path | None,
        typer.Option("--input", "-i", help="Diff results file (defaults to <log-dir>/<pr>.json)."),
    ] = None,
    root: Annotated[Path, typer.Option("--root", "-r", help="Project root holding pyproject.toml.")] = Path("."),
    pr: Annotated[int | None, typer.Option("--pr", help="Pull request number.")] = None,
    target_branch: Annotated[str | None, typer.Option("--target-branch", help="Target branch name.")] = None,
    log_dir: Annotated[Path | None, typer.Option("--log-dir", help="Directory holding diff results.")] = None,
    pipe_log: Annotated[Path | None, typer.Option("--pipe-log", help="Result feed (JSON lines) file.")] = None,
    output_json: Annotated[
        Path | None,
        typer.Option("--output-json", help="Write the structured output to this file."),
    ] = None,
    comment_file: Annotated[
        Path | None,
        typer.Option("--comment-file", help="Write the pull request comment body to this file."),
    ] = None,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable coloured output.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Show debug output.")] = False,
) -> None:
    """Diff before/after issues and report the newly introduced ones.

    Raises:
        typer.Exit: Always raised with the run's exit status.
    """

    logger = build_cli_logger(emoji=not no_emoji, debug=debug, no_color=no_color)
    overrides = {
        "input_file": input_file,
        "pull_request_number": pr,
        "target_branch": target_branch,
        "log_dir": log_dir,
        "pipe_log": pipe_log,
    }
    try:
        settings = load_settings(root, overrides=overrides)
    except ConfigError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=CONFIG_ERROR_EXIT) from exc

    poster = MarkdownFileCommentPoster(comment_file) if comment_file is not None else None
    request = RunRequest(settings=settings, output_json=output_json, poster=poster)
    handler = attach_library_logging(logger)
    try:
        exit_code = execute_run(request, logger)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    finally:
        detach_library_logging(handler)
    raise typer.Exit(code=exit_code)


__all__ = ["app"]
