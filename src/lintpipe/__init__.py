# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration-driven lint/format command sequencer."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("lintpipe")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = ["__version__"]
