# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Derive the ordered step plan from a linter configuration."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from operator import attrgetter

from ..config.models import CommandEntry, LinterConfig
from ..core.config.constants import DIRECTORY_PLACEHOLDER, LEGACY_DIRECTORY_TOKEN
from .steps import AnnounceDirectory, RunDiagnostics, RunFix, Step


def partition_commands(
    commands: Iterable[CommandEntry],
) -> tuple[list[CommandEntry], list[CommandEntry]]:
    """Split ``commands`` into ``(fix, diagnostic)`` groups.

    Relative order within each group matches the input order.
    """

    fix: list[CommandEntry] = []
    diagnostic: list[CommandEntry] = []
    for entry in commands:
        (fix if entry.is_fix else diagnostic).append(entry)
    return fix, diagnostic


def sort_by_level(commands: Iterable[CommandEntry]) -> list[CommandEntry]:
    """Return ``commands`` ordered by ascending level.

    ``sorted`` is stable, so entries sharing a level keep declaration order.
    """

    return sorted(commands, key=attrgetter("level"))


def plan_steps(config: LinterConfig, directory: str) -> list[Step]:
    """Return the execution plan for ``config`` against ``directory``.

    The plan always opens with :class:`AnnounceDirectory`, followed by every
    fix command and then every diagnostic command, each group in ascending
    level order.

    Args:
        config: Validated linter configuration.
        directory: Target directory announced and recorded on each step.

    Returns:
        list[Step]: Ordered steps for the driver.
    """

    fix, diagnostic = partition_commands(config.commands)
    steps: list[Step] = [AnnounceDirectory(directory=directory)]
    steps.extend(
        RunFix(tool=entry.name, directory=directory, command=entry.template) for entry in sort_by_level(fix)
    )
    steps.extend(
        RunDiagnostics(tool=entry.name, directory=directory, command=entry.template)
        for entry in sort_by_level(diagnostic)
    )
    return steps


def substitute_directory(template: str, directory: str) -> str:
    """Apply ``directory`` to a command template.

    Every ``${directory}`` placeholder is replaced, and so is every quoted
    ``"src/"`` left over from templates written against the default
    directory (the quotes are kept).
    """

    return template.replace(DIRECTORY_PLACEHOLDER, directory).replace(LEGACY_DIRECTORY_TOKEN, f'"{directory}"')


def runnable_count(steps: Sequence[Step]) -> int:
    """Return how many of ``steps`` spawn a process."""

    return sum(1 for step in steps if isinstance(step, (RunFix, RunDiagnostics)))


__all__ = ["partition_commands", "plan_steps", "runnable_count", "sort_by_level", "substitute_directory"]
