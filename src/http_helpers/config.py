"""Query-string parsing configuration.

QueryConfig is a frozen dataclass: immutable after creation and validated
once, so a bad setting fails at startup instead of on some later request.
"""

import codecs
from dataclasses import dataclass

from http_helpers.errors import ConfigurationError

# Characters with their own meaning inside a query field
_RESERVED = frozenset("=%+")


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """How raw query strings are split and decoded. Immutable after creation.

    Override what you need::

        config = QueryConfig(separators="&")
    """

    # Field delimiters; each character splits fields independently
    separators: str = "&;"

    # Percent-decoding
    encoding: str = "utf-8"
    errors: str = "replace"  # "strict" would let a bad escape raise

    def __post_init__(self) -> None:
        if not self.separators:
            msg = "QueryConfig.separators must contain at least one character"
            raise ConfigurationError(msg)
        bad = _RESERVED.intersection(self.separators)
        if bad:
            msg = f"QueryConfig.separators may not contain {''.join(sorted(bad))!r}"
            raise ConfigurationError(msg)
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            msg = f"Unknown encoding {self.encoding!r}"
            raise ConfigurationError(msg) from None
        try:
            codecs.lookup_error(self.errors)
        except LookupError:
            msg = f"Unknown codec error handler {self.errors!r}"
            raise ConfigurationError(msg) from None


DEFAULT_QUERY_CONFIG = QueryConfig()
