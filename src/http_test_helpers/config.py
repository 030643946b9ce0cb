"""Centralised, injectable defaults for the response builder."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from .config_file import BuilderConfigFile, is_valid_status_code, is_valid_version
from .exceptions import StatusCodeEnvVarError, VersionEnvVarError
from .response import DEFAULT_STATUS_CODE, DEFAULT_VERSION


@dataclass(frozen=True)
class BuilderConfig:
    """Immutable build-time defaults for `HttpResponseBuilder`.

    Load from environment with `BuilderConfig.from_env()` or construct directly for testing.
    """

    default_version: str = DEFAULT_VERSION
    default_status_code: int = DEFAULT_STATUS_CODE

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Self:
        """Load configuration from environment variables.

        Args:
            dotenv_path: Optional path to .env file. If None, uses default .env discovery.

        Returns:
            BuilderConfig instance populated from environment.
        """
        load_dotenv(dotenv_path)

        return cls(
            default_version=_parse_version(
                os.getenv("HTTP_TEST_DEFAULT_VERSION", ""),
                env_name="HTTP_TEST_DEFAULT_VERSION",
            )
            or DEFAULT_VERSION,
            default_status_code=_parse_status_code(
                os.getenv("HTTP_TEST_DEFAULT_STATUS_CODE", ""),
                env_name="HTTP_TEST_DEFAULT_STATUS_CODE",
            )
            or DEFAULT_STATUS_CODE,
        )

    def with_overrides(
        self,
        *,
        default_version: str | None = None,
        default_status_code: int | None = None,
    ) -> Self:
        """Return a new config with specified overrides."""
        return replace(
            self,
            default_version=self.default_version if default_version is None else default_version,
            default_status_code=self.default_status_code
            if default_status_code is None
            else int(default_status_code),
        )

    def with_file_overrides(self, file_config: BuilderConfigFile) -> Self:
        """Return a new config with config-file values overriding env/default values."""
        return self.with_overrides(
            default_version=file_config.default_version,
            default_status_code=file_config.default_status_code,
        )


def _parse_version(value: str, *, env_name: str) -> str | None:
    """Parse an optional HTTP version from an environment variable."""
    text = value.strip()
    if not text:
        return None
    if not is_valid_version(text):
        raise VersionEnvVarError(env_name)
    return text


def _parse_status_code(value: str, *, env_name: str) -> int | None:
    """Parse an optional status code from an environment variable."""
    text = value.strip()
    if not text:
        return None
    try:
        parsed = int(text)
    except ValueError as exc:
        raise StatusCodeEnvVarError(env_name) from exc
    if not is_valid_status_code(parsed):
        raise StatusCodeEnvVarError(env_name)
    return parsed
