"""Custom exceptions for the HTTP test helpers.

These exceptions give test setup mistakes and failed HTTP expectations their own
types so callers can tell them apart from generic runtime errors.
"""

from __future__ import annotations


class ArgumentError(ValueError):
    """Base exception for structurally invalid arguments passed to the helpers."""

    pass


class HeaderNameError(ArgumentError):
    """Raised when a header name is empty or missing."""

    def __init__(self, name: object = None) -> None:
        super().__init__(f"Header name must be a non-empty string, got {name!r}.")


class HeaderConfiguratorError(ArgumentError):
    """Raised when `with_headers` is given no callable configurator."""

    def __init__(self, configurator: object = None) -> None:
        super().__init__(
            "A header configurator callable is required, "
            f"got {type(configurator).__name__}."
        )


class ReadOnlyHeadersError(TypeError):
    """Raised when the headers of a built response are mutated."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"Cannot {operation}: headers of a built response are read-only. "
            "Configure headers on the builder instead."
        )


class HttpStatusError(Exception):
    """Raised by `ensure_success_status_code` for a non-2xx response."""

    def __init__(self, status_code: int, reason_phrase: str = "") -> None:
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        reason = f" ({reason_phrase})" if reason_phrase else ""
        super().__init__(
            f"Response status code does not indicate success: {status_code}{reason}."
        )


class HttpRequestAssertionError(AssertionError):
    """Raised when an expectation about captured HTTP traffic does not hold.

    Subclasses `AssertionError` so test runners report it as a test failure
    rather than an error. Every instance carries a message; the optional cause is
    chained as `__cause__`.

    Usage example:
        try:
            payload = response.content.json()
        except ValueError as exc:
            raise HttpRequestAssertionError("expected a JSON body", exc) from exc
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        if not isinstance(message, str) or not message:
            raise ValueError("HttpRequestAssertionError requires a non-empty message.")
        super().__init__(message)
        self._message = message
        self._cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    def __str__(self) -> str:
        return self._message


class ConfigFileNotFoundError(FileNotFoundError):
    """Raised when a builder config file path does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Config file not found: {path}")


class ConfigFileParseError(ValueError):
    """Raised when a builder config file is not valid TOML."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Config file {path} is not valid TOML: {detail}")


class ConfigFileValidationError(ValueError):
    """Raised when a builder config file does not match the expected schema."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Config file {path} is invalid: {detail}")


class StatusCodeEnvVarError(ValueError):
    """Raised when an environment variable must be an HTTP status code."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be an integer status code between 100 and 599.")


class VersionEnvVarError(ValueError):
    """Raised when an environment variable must be an HTTP protocol version."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be an HTTP version such as 1.0, 1.1 or 2.")
