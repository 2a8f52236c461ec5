# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console provisioning keyed by output preferences."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import lru_cache

from rich.console import Console


def detect_tty() -> bool:
    """Return ``True`` when stdout is attached to a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@dataclass(frozen=True, slots=True)
class ConsoleProfile:
    """Presentation settings a console is built for.

    ``tty`` is captured at lookup time so a console built for a terminal is
    never reused once stdout has been redirected (for example under a test
    runner).
    """

    color: bool
    emoji: bool
    tty: bool

    @classmethod
    def current(cls, *, color: bool, emoji: bool) -> ConsoleProfile:
        """Return the profile for ``color``/``emoji`` on the present stdout."""

        return cls(color=color, emoji=emoji, tty=detect_tty())

    @property
    def styled(self) -> bool:
        """Return ``True`` when ANSI styling should be written."""

        return self.color and self.tty


@lru_cache(maxsize=8)
def console_for(profile: ConsoleProfile) -> Console:
    """Return the shared console built for ``profile``."""

    return Console(
        color_system="auto" if profile.styled else None,
        force_terminal=profile.tty,
        no_color=not profile.styled,
        emoji=profile.emoji,
        soft_wrap=True,
    )


def get_console(*, color: bool, emoji: bool) -> Console:
    """Return a console honouring ``color`` and ``emoji`` on the current stdout."""

    return console_for(ConsoleProfile.current(color=color, emoji=emoji))


__all__ = ["ConsoleProfile", "console_for", "detect_tty", "get_console"]
