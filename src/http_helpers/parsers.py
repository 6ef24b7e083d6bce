"""Built-in fallible parsers for query values.

Each parser turns one string into a typed value or raises ``ValueError``.
They are stricter than the bare ``int()``/``float()`` builtins: no
surrounding whitespace, no digit-group underscores, ASCII digits only.
"""

import math
import re

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

TRUE_VALUES = frozenset({"true", "1", "yes", "on", "y"})
FALSE_VALUES = frozenset({"false", "0", "no", "off", "n"})

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?)|nan",
    re.IGNORECASE,
)
_INF_RE = re.compile(r"[+-]?inf(?:inity)?", re.IGNORECASE)


def parse_int(value: str) -> int:
    """Parse a base-10 integer with an optional sign.

    Raises ``ValueError`` for anything else, including digit strings past
    the interpreter's int conversion limit.
    """
    if not _INT_RE.fullmatch(value):
        msg = f"invalid integer literal: {value!r}"
        raise ValueError(msg)
    return int(value)


def parse_int64(value: str) -> int:
    """Parse a base-10 integer that fits in a signed 64-bit word."""
    result = parse_int(value)
    if not INT64_MIN <= result <= INT64_MAX:
        msg = f"integer out of 64-bit range: {value!r}"
        raise ValueError(msg)
    return result


def parse_float(value: str) -> float:
    """Parse a decimal floating point literal.

    Accepts sign, fraction and exponent, plus ``inf``/``infinity``/``nan``
    in any case. A finite literal too large for a double is rejected
    rather than silently becoming infinity.
    """
    if not _FLOAT_RE.fullmatch(value):
        msg = f"invalid float literal: {value!r}"
        raise ValueError(msg)
    result = float(value)
    if math.isinf(result) and not _INF_RE.fullmatch(value):
        msg = f"float out of range: {value!r}"
        raise ValueError(msg)
    return result


def parse_bool(value: str) -> bool:
    """Parse a boolean from a fixed, case-insensitive vocabulary.

    ``true``/``1``/``yes``/``on``/``y`` → True,
    ``false``/``0``/``no``/``off``/``n`` → False.
    Surrounding whitespace is ignored.
    """
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    msg = f"invalid boolean: {value!r}"
    raise ValueError(msg)
