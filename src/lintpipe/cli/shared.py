# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging and debug output)."""

from __future__ import annotations

import logging
import re
import sys
from dataclasses import dataclass
from typing import Final

import typer
from rich.console import Console
from rich.text import Text

from ..core.logging import fail as core_fail
from ..core.logging import ok as core_ok
from ..core.logging import warn as core_warn

PACKAGE_LOGGER: Final[str] = "lintpipe"


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

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences."""

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        """Log a success message honouring emoji preferences."""

        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        ``key=value`` pairs in ``message`` are highlighted; values of
        ``command``/``cmd`` keys are styled distinctly.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            key, raw_value = match.group(1), match.group(2)
            text.append(key, style="bold magenta")
            text.append("=", style="dim")
            value_style = "bold blue" if key in {"command", "cmd"} else "bold green"
            text.append(raw_value, style=value_style)
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` bound to a dedicated Rich console.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.
    """

    console = Console(no_color=no_color, highlight=False)
    return CLILogger(console=console, use_emoji=emoji, use_color=not no_color, debug_enabled=debug)


def configure_debug_logging() -> None:
    """Stream ``lintpipe`` library debug records to stderr."""

    logger = logging.getLogger(PACKAGE_LOGGER)
    if getattr(logger, "_lintpipe_debug_configured", False):
        return
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    setattr(logger, "_lintpipe_debug_configured", True)


__all__ = ["CLILogger", "PACKAGE_LOGGER", "build_cli_logger", "configure_debug_logging"]
