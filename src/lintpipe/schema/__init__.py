# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Bundled JSON schema documents."""

__all__: tuple[str, ...] = ()
