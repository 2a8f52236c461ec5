# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core configuration constants."""

from __future__ import annotations

from typing import Final

DEFAULT_DIRECTORY: Final[str] = "src/"
DEFAULT_CONFIG_PATH: Final[str] = "linter.config.json"

DIRECTORY_PLACEHOLDER: Final[str] = "${directory}"
# Legacy templates hardcode the default directory in double quotes.
LEGACY_DIRECTORY_TOKEN: Final[str] = f'"{DEFAULT_DIRECTORY}"'

TIMEOUT_EXIT_CODE: Final[int] = 124
SPAWN_FAILURE_EXIT_CODE: Final[int] = 127

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_DIRECTORY",
    "DIRECTORY_PLACEHOLDER",
    "LEGACY_DIRECTORY_TOKEN",
    "SPAWN_FAILURE_EXIT_CODE",
    "TIMEOUT_EXIT_CODE",
]
