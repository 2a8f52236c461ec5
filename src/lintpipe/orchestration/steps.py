# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Step variants describing the state of a lint run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from ..core.models import DiagnosticSummary


@dataclass(frozen=True, slots=True)
class AnnounceDirectory:
    """Opening step naming the directory being linted."""

    directory: str


@dataclass(frozen=True, slots=True)
class RunFix:
    """Run a fix command expected to mutate files in place."""

    tool: str
    directory: str
    command: str


@dataclass(frozen=True, slots=True)
class FixCompleted:
    """A command finished; ``passes`` is set when the tool reports it."""

    tool: str
    passes: int | None = None


@dataclass(frozen=True, slots=True)
class RunDiagnostics:
    """Run a diagnostic command expected only to report issues."""

    tool: str
    directory: str
    command: str


@dataclass(frozen=True, slots=True)
class FallbackCheck:
    """A tool fell back to checking files one at a time."""

    tool: str


@dataclass(frozen=True, slots=True)
class Summary:
    """Final aggregate for the run."""

    summary: DiagnosticSummary


Step: TypeAlias = AnnounceDirectory | RunFix | FixCompleted | RunDiagnostics | FallbackCheck | Summary
RunnableStep: TypeAlias = RunFix | RunDiagnostics

__all__ = [
    "AnnounceDirectory",
    "FallbackCheck",
    "FixCompleted",
    "RunDiagnostics",
    "RunFix",
    "RunnableStep",
    "Step",
    "Summary",
]
