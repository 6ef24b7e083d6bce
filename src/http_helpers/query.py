"""Typed extraction of query parameters with default fallback.

Every function takes a *source* (a ``Request``, a ``QueryParams``, or any
plain ``Mapping[str, Sequence[str]]`` such as ``parse_qs`` output), a key,
and a default. Nothing here raises on bad input: a missing key, an empty
value, or a value that fails to parse yields the default.

Basic usage::

    from http_helpers import query

    # /products?page=2&limit=50&active=true&sort=price
    page = query.get_int(request, "page", 1)  # 2
    limit = query.get_int(request, "limit", 25)  # 50
    active = query.get_bool(request, "active", False)  # True
    sort = query.get_str(request, "sort", "name")  # "price"
    offset = query.get_int(request, "offset", 0)  # 0 (missing key)

Repeated keys::

    # /items?id=1&id=2&id=invalid&id=5
    query.get_ints(request, "id", 0)  # [1, 2, 0, 5]
    query.get_many(request, "id", None, uuid.UUID)  # any parser works

Scalar getters always read the *first* occurrence. Sequence getters keep one
slot per occurrence, in order, filling unparsable slots with the default.

A parsed value equal to the default looks the same as "used the default".
Use ``has()`` or ``count()`` when presence matters.

Each call reads from *source* directly. To pull many values out of one
request, take a ``snapshot()`` once and pass the resulting dict instead.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import TypeAlias

from http_helpers._internal.multimap import MultiValueMapping
from http_helpers._internal.types import QuerySource
from http_helpers.parsers import parse_bool, parse_float, parse_int, parse_int64

__all__ = [
    "count",
    "first",
    "get_as",
    "get_bool",
    "get_bools",
    "get_float",
    "get_floats",
    "get_int",
    "get_int64",
    "get_int64s",
    "get_ints",
    "get_list",
    "get_many",
    "get_str",
    "has",
    "is_multiple",
    "snapshot",
]

logger = logging.getLogger("http_helpers.query")

# Exception types a parser may raise to mean "not a valid value"
PARSE_FAILURES: tuple[type[Exception], ...] = (ValueError, TypeError, ArithmeticError)

_Params: TypeAlias = MultiValueMapping | Mapping[str, Sequence[str] | str]


# -- Source access --


def _params(source: QuerySource) -> _Params:
    """Unwrap a request-like object to its query multi-map."""
    if isinstance(source, (Mapping, MultiValueMapping)):
        return source
    return source.query


def _lookup(params: _Params, key: str) -> list[str] | None:
    """All raw values for *key* as a new list, or None if the key is absent."""
    if key not in params:
        return None
    if isinstance(params, MultiValueMapping):
        return params.get_list(key)
    values = params[key]
    # A plain str value is one value, not a sequence of characters
    if isinstance(values, str):
        return [values]
    return list(values)


def _first_value(source: QuerySource, key: str) -> str | None:
    values = _lookup(_params(source), key)
    if values:
        return values[0]
    return None


def _convert[T](key: str, raw: str, default: T, parser: Callable[[str], T]) -> T:
    try:
        return parser(raw)
    except PARSE_FAILURES:
        logger.debug(
            "query %r: %.80r rejected by %s, using default",
            key,
            raw,
            getattr(parser, "__name__", parser),
        )
        return default


# -- Scalar extraction --


def get_as[T](source: QuerySource, key: str, default: T, parser: Callable[[str], T]) -> T:
    """Return the first value for *key* converted by *parser*.

    Falls back to *default* when the key is missing, its first value is
    empty, or *parser* raises ``ValueError``/``TypeError``/``ArithmeticError``.
    The empty check runs before the parser is consulted.
    """
    raw = _first_value(source, key)
    if not raw:
        return default
    return _convert(key, raw, default, parser)


def get_str(source: QuerySource, key: str, default: str) -> str:
    """Return the first value for *key*, or *default* if missing or empty."""
    return _first_value(source, key) or default


def get_int(source: QuerySource, key: str, default: int) -> int:
    """Return the first value for *key* as a base-10 ``int``.

    Python ints have no fixed width, so large values such as
    ``99999999999999999999`` come back as-is. Use ``get_int64`` to make
    values outside the signed 64-bit range fall back to *default*.
    """
    return get_as(source, key, default, parse_int)


def get_int64(source: QuerySource, key: str, default: int) -> int:
    """Like ``get_int``, but values outside the signed 64-bit range fall back."""
    return get_as(source, key, default, parse_int64)


def get_float(source: QuerySource, key: str, default: float) -> float:
    """Return the first value for *key* as a ``float``."""
    return get_as(source, key, default, parse_float)


def get_bool(source: QuerySource, key: str, default: bool) -> bool:
    """Return the first value for *key* as a ``bool``.

    Recognized (case-insensitive, whitespace-trimmed):
    ``true``/``1``/``yes``/``on``/``y`` and ``false``/``0``/``no``/``off``/``n``.
    Anything else returns *default*.
    """
    return get_as(source, key, default, parse_bool)


# -- Presence and cardinality --


def has(source: QuerySource, key: str) -> bool:
    """True if *key* appears at all, even as ``?key=`` or a bare ``?key``."""
    return key in _params(source)


def count(source: QuerySource, key: str) -> int:
    """Number of values recorded for *key*; 0 when absent."""
    values = _lookup(_params(source), key)
    return len(values) if values else 0


def is_multiple(source: QuerySource, key: str) -> bool:
    """True if *key* appears more than once."""
    return count(source, key) > 1


# -- Sequence extraction --


def get_list(source: QuerySource, key: str) -> list[str]:
    """Return every raw value for *key*, unparsed.

    ``?tag=`` gives ``[""]``; a missing ``tag`` gives ``[]``.
    """
    return _lookup(_params(source), key) or []


def get_many[T](source: QuerySource, key: str, default: T, parser: Callable[[str], T]) -> list[T]:
    """Convert every value for *key* with *parser*.

    The result has one element per occurrence, in order. An occurrence that
    fails to parse is replaced by *default* in its own slot; nothing is
    dropped. Returns ``[]`` when the key is missing.
    """
    values = _lookup(_params(source), key)
    if not values:
        return []
    return [_convert(key, raw, default, parser) for raw in values]


def get_ints(source: QuerySource, key: str, default: int) -> list[int]:
    """``get_many`` with ``parse_int``."""
    return get_many(source, key, default, parse_int)


def get_int64s(source: QuerySource, key: str, default: int) -> list[int]:
    """``get_many`` with ``parse_int64``."""
    return get_many(source, key, default, parse_int64)


def get_floats(source: QuerySource, key: str, default: float) -> list[float]:
    """``get_many`` with ``parse_float``."""
    return get_many(source, key, default, parse_float)


def get_bools(source: QuerySource, key: str, default: bool) -> list[bool]:
    """``get_many`` with ``parse_bool``."""
    return get_many(source, key, default, parse_bool)


# -- Helpers --


def snapshot(source: QuerySource) -> dict[str, list[str]]:
    """Copy the whole query into a new ``dict[str, list[str]]``.

    Both the dict and every value list are fresh objects, so mutating the
    result never affects *source* or later extraction calls.
    """
    params = _params(source)
    return {key: _lookup(params, key) or [] for key in params}


def first[T](values: Sequence[T], default: T) -> T:
    """Return ``values[0]``, or *default* if *values* is empty."""
    if not values:
        return default
    return values[0]
