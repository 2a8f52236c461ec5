# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rendering helpers for lint steps and run results."""

__all__: tuple[str, ...] = ()
