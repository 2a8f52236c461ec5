# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Process executor collaborators used by the step driver."""

from __future__ import annotations

import logging
import time
from abc import abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..config.constants import SPAWN_FAILURE_EXIT_CODE
from ..errors import CommandFailure
from ..models import ExecutionOutcome
from .process import CommandOptions, run_shell_command

LOGGER = logging.getLogger(__name__)


@runtime_checkable
class ProcessExecutor(Protocol):
    """Run a single tool command and report its outcome."""

    @abstractmethod
    def execute(self, tool: str, command: str, cwd: str) -> ExecutionOutcome:
        """Run ``command`` for ``tool`` inside ``cwd``.

        A non-zero exit status is reported through
        :attr:`ExecutionOutcome.exit_code`; only a process that cannot be
        started raises.

        Args:
            tool: Human-readable tool name.
            command: Fully substituted shell command.
            cwd: Working directory for the child process.

        Returns:
            ExecutionOutcome: Captured exit status, output and duration.

        Raises:
            CommandFailure: If the process cannot be started.
        """
        raise NotImplementedError


@dataclass(slots=True)
class ShellCommandExecutor:
    """Execute commands through the system shell, capturing their output."""

    options: CommandOptions = field(default_factory=CommandOptions)

    def execute(self, tool: str, command: str, cwd: str) -> ExecutionOutcome:
        """Run ``command`` for ``tool`` and capture the result.

        Raises:
            CommandFailure: When the shell cannot be spawned in ``cwd``.
        """

        LOGGER.debug("spawning tool=%s cwd=%s command=%s", tool, cwd, command)
        started = time.monotonic()
        try:
            completed = run_shell_command(command, options=self.options.with_cwd(Path(cwd)))
        except OSError as exc:
            raise CommandFailure(
                command,
                f"{tool}: unable to start command: {exc}",
                exit_code=SPAWN_FAILURE_EXIT_CODE,
                stderr=str(exc),
            ) from exc
        duration_ms = max(0, int((time.monotonic() - started) * 1000))
        LOGGER.debug("finished tool=%s exit=%s duration_ms=%s", tool, completed.returncode, duration_ms)
        return ExecutionOutcome(
            tool=tool,
            exit_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            duration_ms=duration_ms,
        )


__all__ = ["ProcessExecutor", "ShellCommandExecutor"]
