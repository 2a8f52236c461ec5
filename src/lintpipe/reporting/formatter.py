# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render lint steps as human-readable console lines."""

from __future__ import annotations

from typing import assert_never

from ..core.models import DiagnosticSummary
from ..orchestration.steps import (
    AnnounceDirectory,
    FallbackCheck,
    FixCompleted,
    RunDiagnostics,
    RunFix,
    Step,
    Summary,
)


def format_step(step: Step) -> str:
    """Return the display text for ``step``."""

    match step:
        case AnnounceDirectory(directory=directory):
            return f"📋 Linting directory: {directory}"
        case RunFix(tool=tool, directory=directory, command=command):
            return f"🔧 Running {tool} auto-fix on: {directory}\n   ↳ Command: {command}"
        case FixCompleted(tool=tool, passes=None):
            return f"✅ {tool} auto-fix completed"
        case FixCompleted(tool=tool, passes=passes):
            return f"✅ {tool} auto-fix completed ({passes} passes)"
        case RunDiagnostics(tool=tool, directory=directory, command=command):
            return f"🧪 Running {tool} diagnostics on: {directory}\n   ↳ Command: {command}"
        case FallbackCheck(tool=tool):
            return f"🔄 {tool}: Falling back to individual file checking..."
        case Summary(summary=summary):
            return format_summary(summary)
        case _:
            assert_never(step)


def format_summary(summary: DiagnosticSummary) -> str:
    """Return the closing totals line with the per-source breakdown."""

    breakdown = (
        f"{summary.typescript_errors} TypeScript, {summary.eslint_errors} ESLint, {summary.biome_errors} Biome"
    )
    return f"\n📊 Total: {summary.total_errors} errors ({breakdown}), {summary.total_warnings} warnings."


__all__ = ["format_step", "format_summary"]
