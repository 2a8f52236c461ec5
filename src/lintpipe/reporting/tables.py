# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich tables for planned steps and executed command outcomes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from rich import box
from rich.table import Table
from rich.text import Text

from ..core.models import ExecutionOutcome
from ..orchestration.steps import RunDiagnostics, RunFix, Step


@dataclass(slots=True)
class OutcomeRecorder:
    """Collect outcomes emitted through ``DriverHooks.after_command``."""

    outcomes: list[ExecutionOutcome] = field(default_factory=list)

    def __call__(self, outcome: ExecutionOutcome) -> None:
        self.outcomes.append(outcome)

    @property
    def failed(self) -> list[ExecutionOutcome]:
        """Return outcomes that exited with a non-zero status."""

        return [outcome for outcome in self.outcomes if not outcome.ok]


def build_plan_table(steps: Sequence[Step], *, color: bool) -> Table:
    """Return a table listing every runnable step in execution order."""

    table = Table(
        title="Execution Plan",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold" if color else None,
    )
    table.add_column("#", justify="right")
    table.add_column("Phase", style="magenta" if color else None)
    table.add_column("Tool", style="cyan" if color else None)
    table.add_column("Command", overflow="fold")
    index = 0
    for step in steps:
        if isinstance(step, RunFix):
            phase = "fix"
        elif isinstance(step, RunDiagnostics):
            phase = "diagnostics"
        else:
            continue
        index += 1
        table.add_row(str(index), phase, step.tool, Text(step.command))
    return table


def build_outcome_table(outcomes: Sequence[ExecutionOutcome], *, color: bool) -> Table:
    """Return a table summarising exit status and duration per command."""

    table = Table(
        title="Command Outcomes",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold" if color else None,
    )
    table.add_column("Tool", style="cyan" if color else None)
    table.add_column("Exit", justify="right")
    table.add_column("Duration", justify="right", style="green" if color else None)
    for outcome in outcomes:
        exit_style = None if not color else ("green" if outcome.ok else "red")
        table.add_row(
            outcome.tool,
            Text(str(outcome.exit_code), style=exit_style or ""),
            f"{outcome.duration_ms / 1000:.2f}s",
        )
    return table


__all__ = ["OutcomeRecorder", "build_outcome_table", "build_plan_table"]
