# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point for running configured lint commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Final

import typer

from ..config.loader import ConfigLoader, load_schema
from ..core.config.constants import DEFAULT_CONFIG_PATH, DEFAULT_DIRECTORY
from ..core.errors import CommandFailure, ConfigError
from ..core.logging import ConsoleSink, build_console_sink
from ..core.models import ExecutionOutcome
from ..core.runtime.executor import ProcessExecutor, ShellCommandExecutor
from ..core.runtime.process import CommandOptions
from ..orchestration.driver import DriverHooks, StepDriver
from ..orchestration.pipeline import run_pipeline
from ..orchestration.planner import plan_steps, runnable_count
from ..orchestration.steps import RunnableStep
from ..reporting.formatter import format_step
from ..reporting.tables import OutcomeRecorder, build_outcome_table, build_plan_table
from .shared import CLILogger, build_cli_logger, configure_debug_logging

DIRECTORY_HELP: Final[str] = "Directory to lint; announced and substituted into legacy templates."
CONFIG_HELP: Final[str] = "Path to the JSON linter configuration."
DRY_RUN_HELP: Final[str] = "Print the planned steps without running any command."
BAIL_HELP: Final[str] = "Abort the run when a command exits with a non-zero status."
TIMEOUT_HELP: Final[str] = "Per-command timeout in seconds; timed out commands report exit 124."
VERBOSE_HELP: Final[str] = "Echo output of failing commands and print an outcome table."
NO_EMOJI_HELP: Final[str] = "Disable emoji prefixes on log messages."
NO_COLOR_HELP: Final[str] = "Disable coloured output."
DEBUG_HELP: Final[str] = "Emit debug messages for each spawned command."
SHOW_SCHEMA_HELP: Final[str] = "Print the configuration JSON schema and exit."

app = typer.Typer(
    help="Run configured lint and format commands in priority order.",
    add_completion=False,
    no_args_is_help=False,
)


def build_executor(timeout: float | None) -> ProcessExecutor:
    """Return the process executor used for real runs."""

    return ShellCommandExecutor(options=CommandOptions(timeout=timeout))


@app.command()
def lint(
    directory: Annotated[str, typer.Argument(help=DIRECTORY_HELP)] = DEFAULT_DIRECTORY,
    config: Annotated[str, typer.Argument(help=CONFIG_HELP)] = DEFAULT_CONFIG_PATH,
    dry_run: Annotated[bool, typer.Option("--dry-run", help=DRY_RUN_HELP)] = False,
    bail: Annotated[bool, typer.Option("--bail", help=BAIL_HELP)] = False,
    timeout: Annotated[float | None, typer.Option("--timeout", min=0.0, help=TIMEOUT_HELP)] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help=VERBOSE_HELP)] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help=NO_EMOJI_HELP)] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help=NO_COLOR_HELP)] = False,
    debug: Annotated[bool, typer.Option("--debug", help=DEBUG_HELP)] = False,
    show_schema: Annotated[bool, typer.Option("--show-schema", help=SHOW_SCHEMA_HELP)] = False,
) -> None:
    """Plan the configured commands for DIRECTORY and run them in order."""

    if dry_run and show_schema:
        raise typer.BadParameter("--dry-run and --show-schema cannot be combined")

    logger = build_cli_logger(emoji=not no_emoji, debug=debug, no_color=no_color)
    if debug:
        configure_debug_logging()
    if show_schema:
        typer.echo(json.dumps(load_schema(), indent=2))
        raise typer.Exit(code=0)

    sink = build_console_sink(color=not no_color, use_emoji=not no_emoji)
    loader = ConfigLoader()
    if dry_run:
        _print_plan(loader, config, directory, sink=sink, logger=logger, color=not no_color)
        raise typer.Exit(code=0)

    recorder = OutcomeRecorder()
    hooks = DriverHooks(
        before_command=_DebugAnnouncer(logger),
        after_command=_OutcomeReporter(recorder, logger=logger, verbose=verbose),
    )
    driver = StepDriver(executor=build_executor(timeout), sink=sink, hooks=hooks, bail=bail)
    try:
        run_pipeline(config, directory, str(Path.cwd()), loader=loader, driver=driver)
    except ConfigError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    except CommandFailure as exc:
        _report_failure(exc, logger)
        raise typer.Exit(code=1) from exc
    finally:
        if verbose and recorder.outcomes:
            sink.console.print(build_outcome_table(recorder.outcomes, color=not no_color))
    if recorder.failed:
        logger.warn(f"{len(recorder.failed)} command(s) exited with a non-zero status.")
    raise typer.Exit(code=0)


def _print_plan(
    loader: ConfigLoader,
    config_path: str,
    directory: str,
    *,
    sink: ConsoleSink,
    logger: CLILogger,
    color: bool,
) -> None:
    try:
        config = loader.load(config_path)
    except ConfigError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    steps = plan_steps(config, directory)
    for step in steps:
        sink.emit(format_step(step))
    sink.console.print(build_plan_table(steps, color=color))
    logger.ok(f"Planned {runnable_count(steps)} command(s) without execution.")


def _report_failure(exc: CommandFailure, logger: CLILogger) -> None:
    logger.fail(f"{exc.message} (exit {exc.exit_code})")
    logger.echo(f"  command: {exc.command}")
    stderr = exc.stderr.strip()
    if stderr:
        logger.echo(f"  stderr: {stderr.splitlines()[0]}")


class _DebugAnnouncer:
    """``before_command`` hook that logs the resolved command."""

    def __init__(self, logger: CLILogger) -> None:
        self._logger = logger

    def __call__(self, step: RunnableStep, command: str) -> None:
        self._logger.debug(f"tool={step.tool} command={json.dumps(command)}")


class _OutcomeReporter:
    """``after_command`` hook that records outcomes and echoes failing output."""

    def __init__(self, recorder: OutcomeRecorder, *, logger: CLILogger, verbose: bool) -> None:
        self._recorder = recorder
        self._logger = logger
        self._verbose = verbose

    def __call__(self, outcome: ExecutionOutcome) -> None:
        self._recorder(outcome)
        self._logger.debug(f"tool={outcome.tool} exit={outcome.exit_code} duration_ms={outcome.duration_ms}")
        if outcome.ok:
            return
        self._logger.warn(f"{outcome.tool} exited with status {outcome.exit_code}")
        if not self._verbose:
            return
        for stream in (outcome.stdout, outcome.stderr):
            for line in stream.splitlines():
                if line.strip():
                    self._logger.echo(f"  {line}")


__all__ = ["app", "build_executor", "lint"]
