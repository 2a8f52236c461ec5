# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core runtime helpers (errors, console, logging, process execution)."""

__all__: tuple[str, ...] = ()
