# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Status lines and the console output sink used by the lint pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rich.console import Console
from rich.text import Text

from .console import detect_tty, get_console


class Status(Enum):
    """Outcome categories printed by the CLI, with their prefix and style."""

    OK = ("✅ ", "green")
    WARN = ("⚠️ ", "yellow")
    FAIL = ("❌ ", "red")

    def __init__(self, prefix: str, style: str) -> None:
        self.prefix = prefix
        self.style = style


def report(status: Status, msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print ``msg`` as a single ``status`` line.

    Args:
        status: Category deciding the emoji prefix and colour.
        msg: Message text, printed without markup interpretation.
        use_emoji: Prefix the line with the status emoji.
        use_color: Explicit colour flag; ``None`` follows TTY detection.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    text = Text(f"{status.prefix if use_emoji else ''}{msg}")
    if color_enabled:
        text.stylize(status.style)
    get_console(color=color_enabled, emoji=use_emoji).print(text)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report a successful step."""

    report(Status.OK, msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report a command that needs attention but does not abort the run."""

    report(Status.WARN, msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report a fatal configuration or command error."""

    report(Status.FAIL, msg, use_emoji=use_emoji, use_color=use_color)


@dataclass(slots=True)
class ConsoleSink:
    """Output sink that writes pipeline announcements to a Rich console.

    Markup and highlighting are disabled so command templates containing
    brackets are printed exactly as configured.
    """

    console: Console

    def emit(self, line: str) -> None:
        """Print ``line`` verbatim."""

        self.console.print(line, markup=False, highlight=False, emoji=False)


def build_console_sink(*, color: bool, use_emoji: bool) -> ConsoleSink:
    """Return a :class:`ConsoleSink` on the shared console for these settings."""

    return ConsoleSink(console=get_console(color=color, emoji=use_emoji))


__all__ = ["ConsoleSink", "Status", "build_console_sink", "fail", "ok", "report", "warn"]
