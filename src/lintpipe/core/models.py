# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Result models shared across the lintpipe package."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, model_validator


class ExecutionOutcome(BaseModel):
    """Result bundle produced by each executed tool command."""

    model_config = ConfigDict(frozen=True)

    tool: str
    exit_code: int
    stdout: str = ""
    stderr: str = ""
    duration_ms: NonNegativeInt = 0

    @property
    def ok(self) -> bool:
        """Return ``True`` when the command exited successfully."""
        return self.exit_code == 0


class DiagnosticSummary(BaseModel):
    """Aggregated error and warning counts for a full run."""

    model_config = ConfigDict(frozen=True)

    typescript_errors: NonNegativeInt = 0
    eslint_errors: NonNegativeInt = 0
    biome_errors: NonNegativeInt = 0
    total_errors: NonNegativeInt = 0
    total_warnings: NonNegativeInt = Field(default=0)

    @model_validator(mode="after")
    def _check_total(self) -> DiagnosticSummary:
        """Reject totals that disagree with the per-source breakdown."""
        expected = self.typescript_errors + self.eslint_errors + self.biome_errors
        if self.total_errors != expected:
            raise ValueError(f"total_errors must equal the per-source sum ({expected}), got {self.total_errors}")
        return self

    @classmethod
    def from_counts(
        cls,
        *,
        typescript_errors: int = 0,
        eslint_errors: int = 0,
        biome_errors: int = 0,
        total_warnings: int = 0,
    ) -> DiagnosticSummary:
        """Build a summary whose total is derived from the per-source counts."""
        return cls(
            typescript_errors=typescript_errors,
            eslint_errors=eslint_errors,
            biome_errors=biome_errors,
            total_errors=typescript_errors + eslint_errors + biome_errors,
            total_warnings=total_warnings,
        )


__all__ = ["DiagnosticSummary", "ExecutionOutcome"]
