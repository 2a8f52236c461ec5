# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Linter configuration models and loading."""

from __future__ import annotations

from ..core.errors import ConfigError
from .loader import ConfigLoader, load_config
from .models import CommandEntry, LinterConfig, PriorityLevel

__all__ = ["CommandEntry", "ConfigError", "ConfigLoader", "LinterConfig", "PriorityLevel", "load_config"]
