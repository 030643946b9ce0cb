"""Fluent builder for synthetic HTTP responses.

Usage example:
    from http import HTTPStatus

    from http_test_helpers import HttpContent, HttpResponseBuilder

    response = (
        HttpResponseBuilder()
        .with_status_code(HTTPStatus.NOT_FOUND)
        .with_header("X-Request-Id", "abc123")
        .with_content(HttpContent.from_json({"detail": "missing"}))
        .build()
    )
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Self

import requests

from .config import BuilderConfig
from .content import HttpContent
from .exceptions import HeaderConfiguratorError, HeaderNameError
from .headers import ResponseHeaders
from .observability import get_logger
from .response import HttpResponse

logger = get_logger("http_test_helpers.builder")

HeaderConfigurator = Callable[[ResponseHeaders], object]


@dataclass
class _ResponseState:
    version: str | None = None
    status_code: int | None = None
    content: HttpContent | None = None
    request: requests.PreparedRequest | None = None


class HttpResponseBuilder:
    """Accumulate response fields through chained calls, then `build()` a snapshot.

    Every `with_*` method returns the builder itself. Unset fields take their
    defaults from the builder config when `build()` runs. Only structural
    arguments are validated, so intentionally malformed responses (odd status
    codes, contradictory headers) can still be built for negative tests.

    A builder is not thread-safe; confine each instance to one construction
    sequence.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self._config = config or BuilderConfig()
        self._state = _ResponseState()
        self._headers = ResponseHeaders()

    def with_version(self, version: str) -> Self:
        """Set the protocol version, replacing any earlier value."""
        self._state.version = version
        return self

    def with_status_code(self, status_code: int) -> Self:
        """Set the status code, replacing any earlier value. No range check is made."""
        self._state.status_code = int(status_code)
        return self

    def with_headers(self, configurator: HeaderConfigurator) -> Self:
        """Configure headers by calling `configurator` once with the live header collection.

        Raises:
            HeaderConfiguratorError: If `configurator` is None or not callable.
        """
        if configurator is None or not callable(configurator):
            raise HeaderConfiguratorError(configurator)
        logger.debug("Invoking header configurator %r", configurator)
        configurator(self._headers)
        return self

    def with_header(self, name: str, value: str) -> Self:
        """Append a header value, keeping earlier values for the same name.

        Raises:
            HeaderNameError: If `name` is empty or None.
            TypeError: If `value` is not a str (bytes included).
        """
        if not isinstance(name, str) or not name:
            raise HeaderNameError(name)
        self._headers.add(name, value)
        return self

    def with_content(self, content: HttpContent | None) -> Self:
        """Set the body, replacing any earlier one. Pass None for no content."""
        self._state.content = content
        return self

    def with_request_message(self, request: requests.PreparedRequest | None) -> Self:
        """Attach the request that this response answers, for reference only."""
        self._state.request = request
        return self

    def build(self) -> HttpResponse:
        """Return a snapshot of the configured response.

        The builder is left untouched, so calling `build()` again yields an equal
        value, and later `with_*` calls never affect responses already built.
        """
        state = self._state
        response = HttpResponse(
            version=state.version if state.version is not None else self._config.default_version,
            status_code=state.status_code
            if state.status_code is not None
            else self._config.default_status_code,
            headers=self._headers.copy(read_only=True),
            content=state.content,
            request=state.request,
        )
        logger.debug(
            "Built response: version=%s status=%s headers=%d",
            response.version,
            response.status_code,
            len(response.headers),
        )
        return response
