"""Immutable body payloads for synthetic responses."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Self

_DEFAULT_CHARSET = "utf-8"


@dataclass(frozen=True)
class HttpContent:
    """Response body bytes plus the media type that describes them.

    Construct through the factories rather than directly, e.g.
    `HttpContent.from_json({"items": []})`.
    """

    body: bytes = b""
    media_type: str | None = None
    charset: str | None = None

    @classmethod
    def empty(cls) -> Self:
        return cls()

    @classmethod
    def from_bytes(cls, data: bytes, media_type: str = "application/octet-stream") -> Self:
        return cls(body=bytes(data), media_type=media_type)

    @classmethod
    def from_text(
        cls,
        text: str,
        media_type: str = "text/plain",
        charset: str = _DEFAULT_CHARSET,
    ) -> Self:
        return cls(body=text.encode(charset), media_type=media_type, charset=charset)

    @classmethod
    def from_json(cls, payload: object) -> Self:
        """Serialise `payload` as a compact UTF-8 JSON document."""
        text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
        return cls.from_text(text, media_type="application/json")

    @property
    def content_type(self) -> str | None:
        """Value for a Content-Type header, or None when no media type is set."""
        if self.media_type is None:
            return None
        if self.charset is None:
            return self.media_type
        return f"{self.media_type}; charset={self.charset}"

    @property
    def text(self) -> str:
        return self.body.decode(self.charset or _DEFAULT_CHARSET)

    def json(self) -> object:
        return json.loads(self.text)

    def __len__(self) -> int:
        return len(self.body)
