# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core configuration constants package."""

__all__: tuple[str, ...] = ()
