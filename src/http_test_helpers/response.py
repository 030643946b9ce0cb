"""The synthetic response value produced by `HttpResponseBuilder`."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Self

import requests
from requests.structures import CaseInsensitiveDict

from .content import HttpContent
from .exceptions import HttpStatusError
from .headers import ResponseHeaders

DEFAULT_VERSION = "1.1"
DEFAULT_STATUS_CODE = int(HTTPStatus.OK)


def _empty_headers() -> ResponseHeaders:
    return ResponseHeaders(read_only=True)


@dataclass(frozen=True)
class HttpResponse:
    """One synthetic HTTP response.

    Values are snapshots: the headers are read-only and the content is immutable,
    so a response can be shared freely once built. The originating request is
    carried for reference only and is never checked against the response.

    Built responses are hashable. Constructing one directly with mutable
    `ResponseHeaders` makes it unhashable.
    """

    version: str = DEFAULT_VERSION
    status_code: int = DEFAULT_STATUS_CODE
    headers: ResponseHeaders = field(default_factory=_empty_headers)
    content: HttpContent | None = None
    request: requests.PreparedRequest | None = None

    @property
    def reason_phrase(self) -> str:
        try:
            return HTTPStatus(self.status_code).phrase
        except ValueError:
            return ""

    @property
    def is_success_status_code(self) -> bool:
        return 200 <= self.status_code <= 299

    def ensure_success_status_code(self) -> Self:
        """Return the response, or raise HttpStatusError for a non-2xx status."""
        if not self.is_success_status_code:
            raise HttpStatusError(self.status_code, self.reason_phrase)
        return self

    def to_requests_response(self) -> requests.Response:
        """Adapt this value to a `requests.Response` for code that consumes requests.

        Repeated header values are joined with ", ". The content's Content-Type is
        only applied when no Content-Type header was configured explicitly.
        """
        response = requests.Response()
        response.status_code = self.status_code
        response.reason = self.reason_phrase

        headers: CaseInsensitiveDict[str] = CaseInsensitiveDict()
        for name, values in self.headers.items():
            headers[name] = ", ".join(values)
        if self.content is not None:
            content_type = self.content.content_type
            if content_type is not None and "Content-Type" not in headers:
                headers["Content-Type"] = content_type
            response.encoding = self.content.charset
        response.headers = headers

        response._content = self.content.body if self.content is not None else b""
        if self.request is not None:
            response.request = self.request
            response.url = self.request.url or ""
        return response
