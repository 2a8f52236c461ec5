# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions surfaced to callers of the lint pipeline."""

from __future__ import annotations


class LintpipeError(RuntimeError):
    """Base class for fatal pipeline failures."""


class ConfigError(LintpipeError):
    """Raised when a linter configuration document cannot be loaded."""

    def __init__(self, path: str, message: str) -> None:
        """Initialise the error with the offending path.

        Args:
            path: Configuration path supplied by the caller.
            message: Human-readable description of the failure.
        """

        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class CommandFailure(LintpipeError):
    """Raised when a tool command cannot run or must abort the sequence."""

    def __init__(self, command: str, message: str, *, exit_code: int, stderr: str = "") -> None:
        """Initialise the error with captured command metadata.

        Args:
            command: Shell command that failed.
            message: Human-readable description of the failure.
            exit_code: Exit status associated with the failure.
            stderr: Captured standard error, when any.
        """

        super().__init__(message)
        self.command = command
        self.message = message
        self.exit_code = exit_code
        self.stderr = stderr


__all__ = ["CommandFailure", "ConfigError", "LintpipeError"]
