"""Typed parsing and validation for builder config files.

Expected layout:
    schema_version = 1

    [response_defaults]
    default_version = "1.1"
    default_status_code = 200
"""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigFileNotFoundError, ConfigFileParseError, ConfigFileValidationError

_SCHEMA_VERSION = 1
_VERSION_PATTERN = re.compile(r"^\d+(\.\d+)?$")


def is_valid_version(value: str) -> bool:
    """Return True for versions shaped like `major` or `major.minor`."""
    return _VERSION_PATTERN.match(value) is not None


def is_valid_status_code(value: int) -> bool:
    return 100 <= value <= 599


@dataclass(frozen=True)
class BuilderConfigFile:
    """Validated builder defaults loaded from a TOML file."""

    default_version: str | None = None
    default_status_code: int | None = None


class _ResponseDefaultsSectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    default_version: str | None = None
    default_status_code: int | None = None

    @field_validator("default_version")
    @classmethod
    def _validate_version(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        if not is_valid_version(text):
            raise ValueError("expected a version such as 1.0, 1.1 or 2")
        return text

    @field_validator("default_status_code")
    @classmethod
    def _validate_status_code(cls, value: int | None) -> int | None:
        if value is None:
            return None
        if not is_valid_status_code(value):
            raise ValueError("expected a status code between 100 and 599")
        return value


class _ConfigFileModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: int
    response_defaults: _ResponseDefaultsSectionModel

    @field_validator("schema_version")
    @classmethod
    def _validate_schema_version(cls, value: int) -> int:
        if value != _SCHEMA_VERSION:
            raise ValueError(f"unsupported schema version, expected {_SCHEMA_VERSION}")
        return value


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ("<root>",)))
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def load_builder_config_file(path: Path) -> BuilderConfigFile:
    """Load and validate a builder TOML config file."""
    if not path.exists():
        raise ConfigFileNotFoundError(str(path))

    raw_payload = path.read_text(encoding="utf-8")
    try:
        payload: object = tomllib.loads(raw_payload)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigFileParseError(str(path), str(exc)) from exc

    try:
        model = _ConfigFileModel.model_validate(payload)
    except ValidationError as exc:
        raise ConfigFileValidationError(str(path), _format_validation_error(exc)) from exc

    section = model.response_defaults
    return BuilderConfigFile(
        default_version=section.default_version,
        default_status_code=section.default_status_code,
    )
