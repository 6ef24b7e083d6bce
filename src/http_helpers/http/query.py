"""Immutable query string parameters.

Implements ``Mapping[str, str]`` and the ``MultiValueMapping`` protocol.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qs

from http_helpers.config import DEFAULT_QUERY_CONFIG, QueryConfig


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    Attributes:
        _data: Parsed query string as field name -> list of values.
        _raw: Raw query string bytes.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.

    Blank values are kept: ``?tag=`` records one empty string and a bare
    ``?flag`` records one empty string, so presence survives parsing.
    """

    _data: dict[str, list[str]]
    _raw: bytes

    __slots__ = ("_data", "_raw")

    def __init__(self, query_string: bytes = b"", config: QueryConfig | None = None) -> None:
        object.__setattr__(self, "_raw", query_string)
        object.__setattr__(self, "_data", _parse(query_string, config or DEFAULT_QUERY_CONFIG))

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self.get_list(k)!r}" for k in self)
        return f"QueryParams({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key* as a new list."""
        return list(self._data.get(key, []))

    @property
    def raw(self) -> bytes:
        """The query string bytes exactly as received."""
        return self._raw


def _parse(query_string: bytes, config: QueryConfig) -> dict[str, list[str]]:
    # ASGI query strings are percent-encoded ASCII; latin-1 maps every byte
    text = query_string.decode("latin-1")
    separator, *others = config.separators
    for other in others:
        text = text.replace(other, separator)
    return parse_qs(
        text,
        keep_blank_values=True,
        encoding=config.encoding,
        errors=config.errors,
        separator=separator,
    )
