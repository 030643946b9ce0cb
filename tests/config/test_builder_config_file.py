"""Tests for config-file schema parsing and fail-fast validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from http_test_helpers.config_file import load_builder_config_file
from http_test_helpers.exceptions import (
    ConfigFileNotFoundError,
    ConfigFileParseError,
    ConfigFileValidationError,
)


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "http_test_helpers.toml"
    path.write_text(content.strip(), encoding="utf-8")
    return path


def test_load_builder_config_file_parses_valid_toml(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
schema_version = 1

[response_defaults]
default_version = " 2 "
default_status_code = 204
""",
    )

    parsed = load_builder_config_file(path)

    assert parsed.default_version == "2"
    assert parsed.default_status_code == 204


def test_load_builder_config_file_allows_partial_section(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
schema_version = 1

[response_defaults]
default_status_code = 500
""",
    )

    parsed = load_builder_config_file(path)

    assert parsed.default_version is None
    assert parsed.default_status_code == 500


def test_load_builder_config_file_missing_path(tmp_path: Path) -> None:
    with pytest.raises(ConfigFileNotFoundError, match="missing.toml"):
        load_builder_config_file(tmp_path / "missing.toml")


def test_load_builder_config_file_rejects_invalid_toml(tmp_path: Path) -> None:
    path = _write(tmp_path, "schema_version = = 1")

    with pytest.raises(ConfigFileParseError, match="not valid TOML"):
        load_builder_config_file(path)


@pytest.mark.parametrize(
    ("content", "location"),
    [
        ("schema_version = 2\n[response_defaults]\n", "schema_version"),
        ("schema_version = 1\n", "response_defaults"),
        (
            "schema_version = 1\n[response_defaults]\nunknown_key = 1\n",
            "response_defaults.unknown_key",
        ),
        (
            "schema_version = 1\n[response_defaults]\ndefault_status_code = 42\n",
            "response_defaults.default_status_code",
        ),
        (
            'schema_version = 1\n[response_defaults]\ndefault_version = "HTTP/1.1"\n',
            "response_defaults.default_version",
        ),
    ],
)
def test_load_builder_config_file_rejects_schema_violations(
    tmp_path: Path, content: str, location: str
) -> None:
    path = _write(tmp_path, content)

    with pytest.raises(ConfigFileValidationError) as exc_info:
        load_builder_config_file(path)

    assert location in str(exc_info.value)
