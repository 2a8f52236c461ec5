# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Sequential execution of planned lint steps."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Protocol, assert_never, runtime_checkable

from ..core.errors import CommandFailure
from ..core.models import DiagnosticSummary, ExecutionOutcome
from ..core.runtime.executor import ProcessExecutor
from ..reporting.formatter import format_step
from .planner import substitute_directory
from .steps import (
    AnnounceDirectory,
    FallbackCheck,
    FixCompleted,
    RunDiagnostics,
    RunFix,
    RunnableStep,
    Step,
    Summary,
)


@runtime_checkable
class OutputSink(Protocol):
    """Fire-and-forget destination for formatted step text."""

    @abstractmethod
    def emit(self, line: str) -> None:
        """Write ``line`` to the sink."""
        raise NotImplementedError


@dataclass(slots=True)
class DriverHooks:
    """Optional callbacks invoked around each spawned command."""

    before_command: Callable[[RunnableStep, str], None] | None = None
    after_command: Callable[[ExecutionOutcome], None] | None = None


@dataclass(slots=True)
class StepDriver:
    """Walk planned steps in order, spawning a process for runnable ones.

    Steps run strictly one at a time: diagnostics rely on the tree left
    behind by earlier fixes. The first :class:`CommandFailure` aborts the
    remaining steps and propagates to the caller.
    """

    executor: ProcessExecutor
    sink: OutputSink
    hooks: DriverHooks = field(default_factory=DriverHooks)
    bail: bool = False

    def run(self, steps: Sequence[Step], working_dir: str) -> DiagnosticSummary:
        """Execute ``steps`` and emit the closing summary.

        Args:
            steps: Ordered plan produced by :func:`plan_steps`.
            working_dir: Directory commands run in; also substituted into
                command templates.

        Returns:
            DiagnosticSummary: Totals for the run.

        Raises:
            CommandFailure: If a command cannot start, or exits non-zero
                while :attr:`bail` is enabled.
        """

        for step in steps:
            self.run_step(step, working_dir)
        # Tool output is not parsed into per-source counts yet.
        summary = DiagnosticSummary.from_counts()
        self.sink.emit(format_step(Summary(summary=summary)))
        return summary

    def run_step(self, step: Step, working_dir: str) -> ExecutionOutcome | None:
        """Announce ``step`` and execute it when it is runnable.

        Returns:
            ExecutionOutcome | None: Outcome for runnable steps, otherwise ``None``.
        """

        self.sink.emit(format_step(step))
        match step:
            case RunFix() | RunDiagnostics():
                outcome = self._execute(step, working_dir)
                self.sink.emit(format_step(FixCompleted(tool=step.tool)))
                return outcome
            case AnnounceDirectory() | FixCompleted() | FallbackCheck() | Summary():
                return None
            case _:
                assert_never(step)

    def _execute(self, step: RunnableStep, working_dir: str) -> ExecutionOutcome:
        command = substitute_directory(step.command, working_dir)
        if self.hooks.before_command is not None:
            self.hooks.before_command(step, command)
        outcome = self.executor.execute(step.tool, command, working_dir)
        if self.hooks.after_command is not None:
            self.hooks.after_command(outcome)
        if self.bail and not outcome.ok:
            raise CommandFailure(
                command,
                f"{step.tool} exited with status {outcome.exit_code}",
                exit_code=outcome.exit_code,
                stderr=outcome.stderr,
            )
        return outcome


__all__ = ["DriverHooks", "OutputSink", "StepDriver"]
