"""Shared type aliases used across http_helpers modules."""

from collections.abc import Mapping, Sequence
from typing import Protocol, TypeAlias

from http_helpers._internal.multimap import MultiValueMapping


class HasQuery(Protocol):
    """Anything carrying a parsed query, e.g. ``Request``."""

    @property
    def query(self) -> MultiValueMapping: ...


# Where the query extractor reads parameters from
QuerySource: TypeAlias = MultiValueMapping | HasQuery | Mapping[str, Sequence[str] | str]
