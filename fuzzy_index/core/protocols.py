# fuzzy_index/core/protocols.py
"""
Shared result types and Protocol interfaces for the fuzzy indexes.

The facade and tests depend on these small Protocols rather than on the
concrete BKTree/PrefixTrie classes, so either index can be swapped or mocked.
"""

from __future__ import annotations

from typing import Iterable, List, NamedTuple, Optional, Protocol, runtime_checkable
from typing_extensions import TypedDict


# Result records --------------------------------------------------------------

class Match(NamedTuple):
    """A BK-tree hit: stored word and its distance to the query."""

    word: str
    distance: int


class Suggestion(NamedTuple):
    """A prefix completion with its accumulated frequency."""

    word: str
    frequency: int


class FuzzySuggestion(NamedTuple):
    word: str
    distance: int
    frequency: int


class IndexStats(TypedDict):
    """
    Snapshot returned by FuzzyMatcher.stats().

      {"words": 3, "total_frequency": 5, "bk_size": 3, "bk_depth": 2, "metric": "damerau"}
    """

    words: int
    total_frequency: int
    bk_size: int
    bk_depth: int
    metric: str


# Protocols -------------------------------------------------------------------

@runtime_checkable
class DistanceFunction(Protocol):
    """
    Any total, symmetric distance over two strings with an optional cap.

    The BK-tree additionally needs the triangle inequality to hold; that is
    the caller's responsibility and is not checked.
    """

    def __call__(self, a: str, b: str, max_distance: Optional[int] = None) -> int:
        ...


@runtime_checkable
class MetricIndexProtocol(Protocol):
    """Interface for a similarity index (BK-tree)."""

    def insert(self, word: str) -> None:
        ...

    def search(self, query: str, max_distance: int) -> List[Match]:
        """Return every stored word within max_distance, nearest first."""
        ...

    def size(self) -> int:
        ...


@runtime_checkable
class PrefixIndexProtocol(Protocol):
    """Interface for an autocomplete index (trie)."""

    def insert(self, word: str, weight: int = 1) -> None:
        ...

    def contains(self, word: str) -> bool:
        ...

    def has_prefix(self, prefix: str) -> bool:
        ...

    def suggest(self, prefix: str, limit: int = 10) -> List[Suggestion]:
        ...

    def fuzzy_suggest(
        self,
        query: str,
        max_distance: int = 2,
        limit: int = 10,
        distance_fn: Optional[DistanceFunction] = None,
        prefix: Optional[str] = None,
    ) -> List[FuzzySuggestion]:
        ...

    def words(self) -> Iterable[Suggestion]:
        ...

    def size(self) -> int:
        ...
