# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for plan and outcome tables."""

from __future__ import annotations

from helpers.doubles import make_entry
from lintpipe.config.models import LinterConfig
from lintpipe.core.models import ExecutionOutcome
from lintpipe.orchestration.planner import plan_steps
from lintpipe.reporting.tables import OutcomeRecorder, build_outcome_table, build_plan_table


def test_plan_table_lists_only_runnable_steps() -> None:
    config = LinterConfig(
        commands=(
            make_entry("tsc", fix=False, level=0),
            make_entry("biome", fix=True, level=1),
        )
    )

    table = build_plan_table(plan_steps(config, "src/"), color=False)

    assert table.row_count == 2
    assert list(table.columns[1].cells) == ["fix", "diagnostics"]
    assert list(table.columns[2].cells) == ["biome", "tsc"]


def test_outcome_recorder_tracks_failures() -> None:
    recorder = OutcomeRecorder()
    recorder(ExecutionOutcome(tool="tsc", exit_code=0))
    recorder(ExecutionOutcome(tool="eslint", exit_code=1))

    assert [outcome.tool for outcome in recorder.failed] == ["eslint"]

    table = build_outcome_table(recorder.outcomes, color=True)
    assert table.row_count == 2
    assert list(table.columns[2].cells) == ["0.00s", "0.00s"]
