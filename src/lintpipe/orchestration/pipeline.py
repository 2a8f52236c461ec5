# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Compose configuration loading, planning and step execution."""

from __future__ import annotations

from ..config.loader import SupportsConfigLoad
from ..core.models import DiagnosticSummary
from .driver import StepDriver
from .planner import plan_steps


def run_pipeline(
    config_path: str,
    directory: str,
    working_dir: str,
    *,
    loader: SupportsConfigLoad,
    driver: StepDriver,
) -> DiagnosticSummary:
    """Load ``config_path``, plan it for ``directory`` and run every step.

    Raises:
        ConfigError: If the configuration cannot be loaded; no step runs.
        CommandFailure: If a command aborts the sequence.
    """

    config = loader.load(config_path)
    return driver.run(plan_steps(config, directory), working_dir)


__all__ = ["run_pipeline"]
