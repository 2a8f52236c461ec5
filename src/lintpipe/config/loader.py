# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load and validate linter configuration documents."""

from __future__ import annotations

import json
from abc import abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Final, Protocol, runtime_checkable

from jsonschema import Draft202012Validator
from jsonschema import exceptions as jsonschema_exceptions
from pydantic import ValidationError

from ..core.errors import ConfigError
from .models import LinterConfig

SCHEMA_PACKAGE: Final[str] = "lintpipe.schema"
SCHEMA_FILENAME: Final[str] = "linter_config.schema.json"


@runtime_checkable
class SupportsConfigLoad(Protocol):
    """Load a :class:`LinterConfig` from a path."""

    @abstractmethod
    def load(self, path: str) -> LinterConfig:
        """Return the configuration stored at ``path``.

        Raises:
            ConfigError: If the document is missing, malformed or invalid.
        """
        raise NotImplementedError


def load_schema() -> Mapping[str, Any]:
    """Return the bundled JSON schema describing configuration documents."""

    text = resources.files(SCHEMA_PACKAGE).joinpath(SCHEMA_FILENAME).read_text(encoding="utf-8")
    payload = json.loads(text)
    if not isinstance(payload, Mapping):
        raise TypeError(f"{SCHEMA_FILENAME}: schema must be a JSON object at the root level")
    return payload


def _format_schema_error(exc: jsonschema_exceptions.ValidationError) -> str:
    location = "/".join(str(part) for part in exc.absolute_path)
    return f"{location or '<root>'}: {exc.message}"


@dataclass(slots=True)
class ConfigLoader:
    """Loader that reads, parses and validates configuration documents.

    Validation runs in two passes: the JSON schema first (structural and
    range checks with readable paths), then the pydantic models that
    materialise the typed configuration.
    """

    validator: Draft202012Validator = field(default_factory=lambda: Draft202012Validator(load_schema()))

    def load(self, path: str) -> LinterConfig:
        """Return the configuration stored at ``path``.

        Args:
            path: Location of the JSON configuration file.

        Returns:
            LinterConfig: Validated configuration.

        Raises:
            ConfigError: If the file cannot be read, is not valid JSON or
                violates the configuration schema.
        """

        try:
            content = Path(path).resolve().read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(path, f"Failed to read config file: {exc}") from exc
        try:
            document = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ConfigError(path, f"Invalid JSON in config file: {exc}") from exc
        return self.validate(document, path=path)

    def validate(self, document: object, *, path: str) -> LinterConfig:
        """Validate an already-parsed ``document`` attributed to ``path``.

        Raises:
            ConfigError: If the document violates the configuration schema.
        """

        try:
            self.validator.validate(document)
        except jsonschema_exceptions.ValidationError as exc:
            raise ConfigError(path, f"Invalid config schema: {_format_schema_error(exc)}") from exc
        try:
            return LinterConfig.model_validate(document)
        except ValidationError as exc:
            raise ConfigError(path, f"Invalid config schema: {exc}") from exc


def load_config(path: str) -> LinterConfig:
    """Load ``path`` with a default :class:`ConfigLoader`."""

    return ConfigLoader().load(path)


__all__ = ["ConfigLoader", "SupportsConfigLoad", "load_config", "load_schema"]
