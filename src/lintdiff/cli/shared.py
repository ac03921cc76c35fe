# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors)."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import typer
from rich.console import Console
from rich.text import Text

from ..core.logging import fail as core_fail
from ..core.logging import info as core_info
from ..core.logging import ok as core_ok
from ..core.logging import section as core_section
from ..core.logging import warn as core_warn


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    console: Console
    use_emoji: bool
    use_color: bool = True
    debug_enabled: bool = False
    _key_value_re: re.Pattern[str] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences."""

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def info(self, message: str) -> None:
        """Log an informational message honouring emoji preferences."""

        core_info(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences."""

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        """Log a success message honouring emoji preferences."""

        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def section(self, title: str) -> None:
        """Render a section header."""

        core_section(title, use_color=self.use_color)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper.

        Args:
            message: Text written to standard output.
        """

        typer.echo(message)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        Args:
            message: Debug payload rendered with simple highlighting.
        """

        if self.debug_enabled:
            text = Text("[debug] ", style="bold cyan")
            cursor = 0
            for match in self._key_value_re.finditer(message):
                start, end = match.span()
                if start > cursor:
                    text.append(message[cursor:start], style="dim")
                key, raw_value = match.group(1), match.group(2)
                text.append(key, style="bold magenta")
                text.append("=", style="dim")
                text.append(raw_value, style="bold green")
                cursor = end
            if cursor < len(message):
                text.append(message[cursor:], style="dim")
            self.console.print(text)


class CLILogHandler(logging.Handler):
    """Forward library log records to :meth:`CLILogger.debug`."""

    def __init__(self, logger: CLILogger) -> None:
        super().__init__(level=logging.DEBUG)
        self._logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        self._logger.debug(f"{record.name}: {record.getMessage()}")


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided emoji preference.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger instance bound to a dedicated Rich console.
    """

    console = Console(no_color=no_color, highlight=False, soft_wrap=True)
    return CLILogger(console=console, use_emoji=emoji, use_color=not no_color, debug_enabled=debug)


def attach_library_logging(logger: CLILogger) -> CLILogHandler | None:
    """Route ``lintdiff`` library debug logging through ``logger`` when debugging.

    Args:
        logger: CLI logger receiving the records.

    Returns:
        CLILogHandler | None: Installed handler, ``None`` when debug output is disabled.
    """

    if not logger.debug_enabled:
        return None
    handler = CLILogHandler(logger)
    package_logger = logging.getLogger("lintdiff")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    return handler


def detach_library_logging(handler: CLILogHandler | None) -> None:
    """Remove a handler installed by :func:`attach_library_logging`."""

    if handler is not None:
        logging.getLogger("lintdiff").removeHandler(handler)


__all__ = [
    "CLIError",
    "CLILogHandler",
    "CLILogger",
    "attach_library_logging",
    "build_cli_logger",
    "detach_library_logging",
]
