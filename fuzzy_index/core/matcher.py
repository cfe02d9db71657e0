# matcher.py
"""
FuzzyMatcher - application facade over the two indexes.

Purpose:
 - Own one BKTree and one PrefixTrie built over the same vocabulary
 - Simple public API for CLI/tests:
     add(word, weight), add_many(entries), similar(query), complete(prefix),
     fuzzy_complete(query), stats()
 - Defaults (max distance, limit, metric) come from Config

Not thread-safe: serialize add()/add_many() against queries.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from fuzzy_index.core.bktree import BKTree
from fuzzy_index.core.distance import DistanceFn, get_metric, metric_name
from fuzzy_index.core.protocols import FuzzySuggestion, IndexStats, Match, Suggestion
from fuzzy_index.core.trie import PrefixTrie, split_entry
from fuzzy_index.utils.config_manager import Config
from fuzzy_index.utils.logger_utils import Log
from fuzzy_index.utils.vocab import load_vocabulary


class FuzzyMatcher:
    """Facade exposing similarity search and (fuzzy) autocomplete over one vocabulary."""

    def __init__(
        self,
        config: Optional[Config] = None,
        distance_fn: Optional[DistanceFn] = None,
        log: Optional[Log] = None,
    ):
        self.config = config or Config()
        self.log = log or Log(
            path=self.config["log_path"], level=self.config["log_level"], echo=False
        )
        self.distance_fn = distance_fn or get_metric(self.config["metric"])
        self.bk = BKTree(self.distance_fn)
        self.trie = PrefixTrie()

    @classmethod
    def from_file(
        cls,
        path: str,
        config: Optional[Config] = None,
        distance_fn: Optional[DistanceFn] = None,
        log: Optional[Log] = None,
    ) -> "FuzzyMatcher":
        """Build a matcher from a vocabulary file (see utils.vocab)."""
        matcher = cls(config=config, distance_fn=distance_fn, log=log)
        entries = load_vocabulary(path)
        with matcher.log.time_block(f"index {path}"):
            matcher.add_many(entries)
        matcher.log.info(
            f"[FuzzyMatcher] loaded {matcher.size()} words from {path} "
            f"(metric={metric_name(matcher.distance_fn)}, bk depth={matcher.bk.depth()})"
        )
        return matcher

    # building -------------------------------------------------------------
    def add(self, word: str, weight: int = 1) -> None:
        """Insert into both indexes; the trie accumulates weight, the BK-tree dedups."""
        self.trie.insert(word, weight)
        self.bk.insert(word)

    def add_many(self, entries: Iterable[Any]) -> None:
        """Bulk insert plain words or (word, frequency) pairs."""
        count = 0
        for item in entries:
            word, weight = split_entry(item)
            self.add(word, weight)
            count += 1
        self.log.debug(f"[FuzzyMatcher] add_many: {count} entries, {self.size()} distinct")

    # queries ---------------------------------------------------------------
    def similar(self, query: str, max_distance: Optional[int] = None) -> List[Match]:
        """All words within max_distance of query (BK-tree), nearest first."""
        k = self.config["max_distance"] if max_distance is None else max_distance
        hits = self.bk.search(query, k)
        self.log.debug(f"[FuzzyMatcher] similar({query!r}, {k}) -> {len(hits)}")
        return hits

    def complete(self, prefix: str, limit: Optional[int] = None) -> List[Suggestion]:
        """Frequency-ranked completions of prefix (trie)."""
        n = self.config["limit"] if limit is None else limit
        return self.trie.suggest(prefix, n)

    def fuzzy_complete(
        self,
        query: str,
        max_distance: Optional[int] = None,
        limit: Optional[int] = None,
        prefix: Optional[str] = None,
    ) -> List[FuzzySuggestion]:
        """Typo-tolerant suggestions (trie full scan through the configured metric)."""
        k = self.config["max_distance"] if max_distance is None else max_distance
        n = self.config["limit"] if limit is None else limit
        hits = self.trie.fuzzy_suggest(
            query, max_distance=k, limit=n, distance_fn=self.distance_fn, prefix=prefix
        )
        self.log.debug(f"[FuzzyMatcher] fuzzy_complete({query!r}, {k}) -> {len(hits)}")
        return hits

    # introspection ---------------------------------------------------------
    def size(self) -> int:
        return self.trie.size()

    def __len__(self) -> int:
        return self.trie.size()

    def __contains__(self, word: str) -> bool:
        return word in self.trie

    def stats(self) -> IndexStats:
        return {
            "words": self.trie.size(),
            "total_frequency": sum(s.frequency for s in self.trie.words()),
            "bk_size": self.bk.size(),
            "bk_depth": self.bk.depth(),
            "metric": metric_name(self.distance_fn),
        }
