# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process execution runtime."""

__all__: tuple[str, ...] = ()
