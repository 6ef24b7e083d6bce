"""MultiValueMapping protocol: what the query extractor reads through.

``QueryParams`` and ``Headers`` satisfy it, but so does any object that can
answer membership, list its keys, and return every value for a key.
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only multi-map of string keys to ordered string values.

    ``get_list`` must return a fresh list on every call, ``[]`` for an
    absent key. Iteration yields each key once.
    """

    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def get_list(self, key: str) -> list[str]: ...
