# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a JSON config document into ``tmp_path``."""

    def _write(document: Any, name: str = "linter.config.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_document() -> dict[str, Any]:
    """Return a valid configuration document with one fix and one check."""
    return {
        "commands": [
            {"commandName": "eslint-fix", "command": "echo fix ${directory}", "isCommandFix": True, "level": 0},
            {"commandName": "eslint-check", "command": "echo check", "isCommandFix": False, "level": 1},
        ],
        "priorityLevels": [{"level": 1, "name": "Critical", "rules": ["ts(2307)"]}],
    }
