# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Behavioural tests for :mod:`lintpipe.orchestration.driver`."""

from __future__ import annotations

import pytest

from helpers.doubles import ListSink, RecordingExecutor, make_entry
from lintpipe.config.models import LinterConfig
from lintpipe.core.errors import CommandFailure, ConfigError
from lintpipe.core.models import DiagnosticSummary, ExecutionOutcome
from lintpipe.core.runtime.executor import ProcessExecutor
from lintpipe.orchestration.driver import DriverHooks, OutputSink, StepDriver
from lintpipe.orchestration.pipeline import run_pipeline
from lintpipe.orchestration.planner import plan_steps
from lintpipe.orchestration.steps import FallbackCheck, FixCompleted, RunnableStep, Summary


def _config() -> LinterConfig:
    return LinterConfig(
        commands=(
            make_entry("eslint-check", fix=False, level=1, command="npx eslint ${directory}"),
            make_entry("eslint-fix", fix=True, level=0, command='npx eslint --fix "src/"'),
            make_entry("tsc", fix=False, level=0, command="npx tsc --noEmit"),
        )
    )


def test_doubles_satisfy_collaborator_protocols() -> None:
    assert isinstance(RecordingExecutor(), ProcessExecutor)
    assert isinstance(ListSink(), OutputSink)


def test_runs_steps_in_plan_order_and_emits_summary() -> None:
    executor = RecordingExecutor()
    sink = ListSink()

    summary = StepDriver(executor=executor, sink=sink).run(plan_steps(_config(), "src/"), "/work")

    assert [call[0] for call in executor.calls] == ["eslint-fix", "tsc", "eslint-check"]
    assert summary == DiagnosticSummary()
    assert sink.lines == [
        "📋 Linting directory: src/",
        '🔧 Running eslint-fix auto-fix on: src/\n   ↳ Command: npx eslint --fix "src/"',
        "✅ eslint-fix auto-fix completed",
        "🧪 Running tsc diagnostics on: src/\n   ↳ Command: npx tsc --noEmit",
        "✅ tsc auto-fix completed",
        "🧪 Running eslint-check diagnostics on: src/\n   ↳ Command: npx eslint ${directory}",
        "✅ eslint-check auto-fix completed",
        "\n📊 Total: 0 errors (0 TypeScript, 0 ESLint, 0 Biome), 0 warnings.",
    ]


def test_commands_are_substituted_with_working_dir() -> None:
    executor = RecordingExecutor()

    StepDriver(executor=executor, sink=ListSink()).run(plan_steps(_config(), "src/"), "/work")

    assert executor.calls == [
        ("eslint-fix", 'npx eslint --fix "/work"', "/work"),
        ("tsc", "npx tsc --noEmit", "/work"),
        ("eslint-check", "npx eslint /work", "/work"),
    ]


def test_empty_plan_only_announces_and_summarises() -> None:
    executor = RecordingExecutor()
    sink = ListSink()

    StepDriver(executor=executor, sink=sink).run(plan_steps(LinterConfig(), "src/"), "/work")

    assert executor.calls == []
    assert len(sink.lines) == 2


def test_informational_steps_never_spawn_processes() -> None:
    executor = RecordingExecutor()
    sink = ListSink()
    driver = StepDriver(executor=executor, sink=sink)

    for step in (FallbackCheck(tool="Biome"), FixCompleted(tool="Biome", passes=2), Summary(DiagnosticSummary())):
        assert driver.run_step(step, "/work") is None

    assert executor.calls == []
    assert sink.lines[0] == "🔄 Biome: Falling back to individual file checking..."


def test_first_command_failure_aborts_remaining_steps() -> None:
    executor = RecordingExecutor(fail_on="tsc")
    sink = ListSink()

    with pytest.raises(CommandFailure) as excinfo:
        StepDriver(executor=executor, sink=sink).run(plan_steps(_config(), "src/"), "/work")

    assert [call[0] for call in executor.calls] == ["eslint-fix", "tsc"]
    assert excinfo.value.command == "npx tsc --noEmit"
    assert excinfo.value.exit_code == 127
    assert not any("📊" in line for line in sink.lines)
    assert "✅ tsc auto-fix completed" not in sink.lines


def test_non_zero_exit_continues_without_bail() -> None:
    executor = RecordingExecutor(exit_codes={"eslint-fix": 1})

    StepDriver(executor=executor, sink=ListSink()).run(plan_steps(_config(), "src/"), "/work")

    assert len(executor.calls) == 3


def test_bail_turns_non_zero_exit_into_failure() -> None:
    executor = RecordingExecutor(exit_codes={"eslint-fix": 2})

    with pytest.raises(CommandFailure) as excinfo:
        StepDriver(executor=executor, sink=ListSink(), bail=True).run(plan_steps(_config(), "src/"), "/work")

    assert len(executor.calls) == 1
    assert excinfo.value.exit_code == 2
    assert excinfo.value.stderr == "boom"
    assert excinfo.value.message == "eslint-fix exited with status 2"


def test_hooks_observe_each_command() -> None:
    before: list[tuple[str, str]] = []
    after: list[ExecutionOutcome] = []

    def on_before(step: RunnableStep, command: str) -> None:
        before.append((step.tool, command))

    hooks = DriverHooks(before_command=on_before, after_command=after.append)
    StepDriver(executor=RecordingExecutor(), sink=ListSink(), hooks=hooks).run(
        plan_steps(_config(), "src/"), "/work"
    )

    assert before[0] == ("eslint-fix", 'npx eslint --fix "/work"')
    assert [outcome.tool for outcome in after] == ["eslint-fix", "tsc", "eslint-check"]


class _FailingLoader:
    def load(self, path: str) -> LinterConfig:
        raise ConfigError(path, "Invalid config schema: level must be >= 0")


class _StaticLoader:
    def __init__(self, config: LinterConfig) -> None:
        self.config = config
        self.paths: list[str] = []

    def load(self, path: str) -> LinterConfig:
        self.paths.append(path)
        return self.config


def test_pipeline_config_error_prevents_any_execution() -> None:
    executor = RecordingExecutor()
    sink = ListSink()

    with pytest.raises(ConfigError):
        run_pipeline(
            "linter.config.json",
            "src/",
            "/work",
            loader=_FailingLoader(),
            driver=StepDriver(executor=executor, sink=sink),
        )

    assert executor.calls == []
    assert sink.lines == []


def test_pipeline_loads_plans_and_runs() -> None:
    loader = _StaticLoader(_config())
    executor = RecordingExecutor()

    summary = run_pipeline(
        "custom.json",
        "lib/",
        "/work",
        loader=loader,
        driver=StepDriver(executor=executor, sink=ListSink()),
    )

    assert loader.paths == ["custom.json"]
    assert len(executor.calls) == 3
    assert summary.total_errors == 0
