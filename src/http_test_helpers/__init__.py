"""Fluent builders and assertion errors for testing HTTP client code."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .builder import HttpResponseBuilder
from .config import BuilderConfig
from .content import HttpContent
from .exceptions import (
    ArgumentError,
    HeaderConfiguratorError,
    HeaderNameError,
    HttpRequestAssertionError,
    HttpStatusError,
    ReadOnlyHeadersError,
)
from .headers import ResponseHeaders
from .response import HttpResponse

_PACKAGE_NAME = "http-test-helpers"


def _resolve_version() -> str:
    try:
        return version(_PACKAGE_NAME)
    except PackageNotFoundError:
        return "0.0.0+unknown"


__version__ = _resolve_version()

__all__ = [
    "ArgumentError",
    "BuilderConfig",
    "HeaderConfiguratorError",
    "HeaderNameError",
    "HttpContent",
    "HttpRequestAssertionError",
    "HttpResponse",
    "HttpResponseBuilder",
    "HttpStatusError",
    "ReadOnlyHeadersError",
    "ResponseHeaders",
    "__version__",
]
