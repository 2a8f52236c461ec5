# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run configured shell command templates through ``subprocess``."""

from __future__ import annotations

import subprocess  # nosec B404
from dataclasses import dataclass, replace
from pathlib import Path
from subprocess import CompletedProcess

from ..config.constants import TIMEOUT_EXIT_CODE


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Immutable options applied to every spawned command."""

    cwd: Path | None = None
    timeout: float | None = None

    def __post_init__(self) -> None:
        if self.timeout is not None and self.timeout < 0:
            raise ValueError("timeout must be non-negative")

    def with_cwd(self, cwd: Path | None) -> CommandOptions:
        """Return a copy of the options bound to ``cwd``."""

        return replace(self, cwd=cwd)


def _ensure_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode(errors="ignore")
    return value


def run_shell_command(command: str, *, options: CommandOptions | None = None) -> CompletedProcess[str]:
    """Execute ``command`` through the system shell and capture its output.

    The command string is handed to the shell as-is; a blank command is a
    no-op that exits 0. A timeout is reported as exit status 124 with a note
    appended to stderr rather than raised, so callers see it like any other
    non-zero exit.

    Args:
        command: Shell command line to execute.
        options: Working directory and timeout; defaults to neither.

    Returns:
        CompletedProcess[str]: Exit status with captured stdout and stderr.

    Raises:
        OSError: If the shell cannot be spawned (for example a missing ``cwd``).
    """

    resolved = options or CommandOptions()
    try:
        return subprocess.run(  # nosec B602 - configured templates are shell commands
            command,
            shell=True,
            cwd=str(resolved.cwd) if resolved.cwd is not None else None,
            check=False,
            capture_output=True,
            text=True,
            timeout=resolved.timeout,
            stdin=subprocess.DEVNULL,
        )
    except subprocess.TimeoutExpired as exc:
        stderr = _ensure_text(exc.stderr)
        timeout_msg = f"Command timed out after {resolved.timeout:g}s"
        return subprocess.CompletedProcess(
            args=command,
            returncode=TIMEOUT_EXIT_CODE,
            stdout=_ensure_text(exc.stdout),
            stderr=f"{stderr}\n{timeout_msg}" if stderr else timeout_msg,
        )


__all__ = ["CommandOptions", "run_shell_command"]
