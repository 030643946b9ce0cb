"""Case-insensitive, ordered, multi-valued header collection.

Usage example:
    from http_test_helpers.headers import ResponseHeaders

    headers = ResponseHeaders()
    headers.add("Set-Cookie", "a=1")
    headers.add("set-cookie", "b=2")
    headers["Set-Cookie"]  # ["a=1", "b=2"]
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Self

from typing_extensions import override

from .exceptions import HeaderNameError, ReadOnlyHeadersError

HeaderValues = str | Iterable[str]


def _key(name: object) -> str:
    if not isinstance(name, str) or not name:
        raise HeaderNameError(name)
    return name.lower()


def _as_value(value: object) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"Header values must be str, got {type(value).__name__}.")
    return value


def _as_values(values: HeaderValues | None) -> list[str]:
    if values is None or isinstance(values, str):
        return [_as_value(values)]
    if isinstance(values, (bytes, bytearray)) or not isinstance(values, Iterable):
        raise TypeError(f"Header values must be str, got {type(values).__name__}.")
    return [_as_value(value) for value in values]


class ResponseHeaders(MutableMapping[str, list[str]]):
    """Header multi-map keyed by case-insensitive name.

    Names keep the casing of their first insertion and iterate in insertion order.
    Each name maps to an ordered list of values; `add` appends while item
    assignment replaces.
    """

    def __init__(
        self,
        headers: Mapping[str, HeaderValues] | Iterable[tuple[str, str]] | None = None,
        *,
        read_only: bool = False,
    ) -> None:
        self._entries: dict[str, tuple[str, list[str]]] = {}
        self._read_only = False
        if headers is not None:
            pairs = headers.items() if isinstance(headers, Mapping) else headers
            for name, values in pairs:
                self.add_all(name, _as_values(values))
        self._read_only = read_only

    @property
    def read_only(self) -> bool:
        return self._read_only

    def _check_writable(self, operation: str) -> None:
        if self._read_only:
            raise ReadOnlyHeadersError(operation)

    def add(self, name: str, value: str | None) -> None:
        """Append a value for `name`, keeping any values already present."""
        self.add_all(name, _as_values(value))

    def add_all(self, name: str, values: Iterable[str]) -> None:
        """Append several values for `name` in order."""
        key = _key(name)
        self._check_writable(f"add header {name!r}")
        new_values = _as_values(values)
        if key in self._entries:
            self._entries[key][1].extend(new_values)
        else:
            self._entries[key] = (name, new_values)

    def remove(self, name: str) -> bool:
        """Remove every value for `name`; return whether anything was removed."""
        key = _key(name)
        self._check_writable(f"remove header {name!r}")
        return self._entries.pop(key, None) is not None

    def get_values(self, name: str) -> list[str]:
        entry = self._entries.get(_key(name))
        return list(entry[1]) if entry is not None else []

    def get_first(self, name: str, default: str | None = None) -> str | None:
        values = self.get_values(name)
        return values[0] if values else default

    def copy(self, *, read_only: bool = False) -> Self:
        clone = type(self)()
        for name, values in self._entries.values():
            clone._entries[name.lower()] = (name, list(values))
        clone._read_only = read_only
        return clone

    def pairs(self) -> Iterator[tuple[str, str]]:
        """Yield `(name, value)` for every value, in insertion order."""
        for name, values in self._entries.values():
            for value in values:
                yield name, value

    @override
    def __getitem__(self, name: str) -> list[str]:
        if not isinstance(name, str) or not name:
            raise KeyError(name)
        entry = self._entries.get(name.lower())
        if entry is None:
            raise KeyError(name)
        return list(entry[1])

    @override
    def __setitem__(self, name: str, values: HeaderValues) -> None:
        key = _key(name)
        self._check_writable(f"set header {name!r}")
        existing = self._entries.get(key)
        original = existing[0] if existing is not None else name
        self._entries[key] = (original, _as_values(values))

    @override
    def __delitem__(self, name: str) -> None:
        key = _key(name)
        self._check_writable(f"delete header {name!r}")
        if key not in self._entries:
            raise KeyError(name)
        del self._entries[key]

    @override
    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._entries.values())

    @override
    def __len__(self) -> int:
        return len(self._entries)

    @override
    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str) or not name:
            return False
        return name.lower() in self._entries

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResponseHeaders):
            other_headers = other
        elif isinstance(other, Mapping):
            try:
                other_headers = ResponseHeaders(other)
            except (HeaderNameError, TypeError):
                return False
        else:
            return NotImplemented
        return {key: values for key, (_, values) in self._entries.items()} == {
            key: values for key, (_, values) in other_headers._entries.items()
        }

    @override
    def __hash__(self) -> int:
        if not self._read_only:
            raise TypeError(f"unhashable type: '{type(self).__name__}' unless read-only")
        return hash(
            tuple(sorted((key, tuple(values)) for key, (_, values) in self._entries.items()))
        )

    @override
    def __repr__(self) -> str:
        items = ", ".join(f"{name!r}: {values!r}" for name, values in self._entries.values())
        flag = ", read_only=True" if self._read_only else ""
        return f"{type(self).__name__}({{{items}}}{flag})"
