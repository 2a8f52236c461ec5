# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Command-line interface for lintpipe; the Typer application lives in :mod:`lintpipe.cli.app`."""
