# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typed representation of the linter configuration document."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt, StringConstraints

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class CommandEntry(BaseModel):
    """One invocation of an external tool."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: NonEmptyStr = Field(alias="commandName")
    template: NonEmptyStr = Field(alias="command")
    is_fix: bool = Field(alias="isCommandFix")
    level: NonNegativeInt


class PriorityLevel(BaseModel):
    """Named group of rule identifiers.

    Priority levels are retained as declared configuration; the planner does
    not consume them.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    level: PositiveInt
    name: NonEmptyStr
    rules: tuple[NonEmptyStr, ...] = Field(min_length=1)


class LinterConfig(BaseModel):
    """Full linter configuration: commands plus priority metadata."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    commands: tuple[CommandEntry, ...] = Field(default_factory=tuple)
    priority_levels: tuple[PriorityLevel, ...] = Field(default_factory=tuple, alias="priorityLevels")


__all__ = ["CommandEntry", "LinterConfig", "NonEmptyStr", "PriorityLevel"]
