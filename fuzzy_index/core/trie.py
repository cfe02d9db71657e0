# trie.py
# Prefix trie for autocompletion.
# Keeps accumulated word frequencies for ranking, plus a typo-tolerant
# suggestion path that scans stored words through an edit-distance function.
# Traversals use an explicit stack, so long words don't hit the recursion limit.

from __future__ import annotations

from collections import defaultdict
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from fuzzy_index.core.distance import DistanceFn, damerau_levenshtein
from fuzzy_index.core.protocols import FuzzySuggestion, Suggestion


class TrieNode:
    """
    A single node in the trie.
    children: char -> TrieNode
    is_end_of_word: True if some inserted word ends here
    word: the full word (only set on end-of-word nodes)
    frequency: accumulated insertion weight of that word
    """

    __slots__ = ("children", "is_end_of_word", "word", "frequency")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = defaultdict(TrieNode)
        self.is_end_of_word = False
        self.word: Optional[str] = None
        self.frequency = 0


def split_entry(item: Any) -> Tuple[str, int]:
    """
    Accept a plain word, a (word, frequency) pair or a {"word", "frequency"}
    mapping and return (word, frequency). A missing or zero frequency counts
    as 1 for both pair and mapping entries.
    """
    if isinstance(item, str):
        return item, 1
    if isinstance(item, Mapping):
        if not isinstance(item.get("word"), str):
            raise TypeError(f"entry mapping needs a 'word' string: {item!r}")
        return item["word"], int(item.get("frequency") or 1)
    try:
        word, freq = item
    except (TypeError, ValueError):
        raise TypeError(f"expected a word or (word, frequency) pair, got {item!r}") from None
    if not isinstance(word, str):
        raise TypeError(f"expected a string word, got {word!r}")
    return word, int(freq) or 1


class PrefixTrie:
    """
    Trie over a vocabulary, used for:
     - exact membership and prefix checks
     - frequency-ranked completions under a prefix
     - fuzzy (typo-tolerant) suggestions over the stored words
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    @classmethod
    def from_entries(cls, entries: Iterable[Any]) -> "PrefixTrie":
        """Build a trie from plain words (weight 1) and/or (word, frequency) pairs."""
        trie = cls()
        for item in entries:
            word, freq = split_entry(item)
            trie.insert(word, freq)
        return trie

    # insertion -----------------------------------------------------
    def insert(self, word: str, weight: int = 1) -> None:
        """
        Insert `word`, adding `weight` to its frequency.
        Re-inserting accumulates weight, so repeated words rank higher.
        The weight is the one validated argument: below 1 raises ValueError
        (from_entries maps a zero frequency to 1 before getting here).
        """
        if weight < 1:
            raise ValueError(f"weight must be >= 1, got {weight}")

        node = self._root
        for ch in word:
            node = node.children[ch]

        if not node.is_end_of_word:
            self._size += 1
        node.is_end_of_word = True
        node.word = word
        node.frequency += weight

    # lookups ---------------------------------------------------------
    def _find_node(self, s: str) -> Optional[TrieNode]:
        node = self._root
        for ch in s:
            nxt = node.children.get(ch)
            if nxt is None:
                return None
            node = nxt
        return node

    def contains(self, word: str) -> bool:
        node = self._find_node(word)
        return node is not None and node.is_end_of_word

    def has_prefix(self, prefix: str) -> bool:
        """True if some stored word starts with `prefix`."""
        return self._find_node(prefix) is not None

    def frequency(self, word: str) -> int:
        """Accumulated weight of `word`, 0 if it was never inserted."""
        node = self._find_node(word)
        if node is None or not node.is_end_of_word:
            return 0
        return node.frequency

    # suggestions ---------------------------------------------------
    def suggest(self, prefix: str, limit: int = 10) -> List[Suggestion]:
        """
        Return up to `limit` completions of `prefix` as Suggestion(word, frequency),
        sorted by higher frequency first, then lexicographically.
        An unknown prefix gives [].
        """
        if limit <= 0:
            return []
        node = self._find_node(prefix)
        if node is None:
            return []

        out = list(self._iter_words(node))
        out.sort(key=lambda s: (-s.frequency, s.word))
        return out[:limit]

    def fuzzy_suggest(
        self,
        query: str,
        max_distance: int = 2,
        limit: int = 10,
        distance_fn: Optional[DistanceFn] = None,
        prefix: Optional[str] = None,
    ) -> List[FuzzySuggestion]:
        """
        Typo-tolerant suggestions: every stored word within `max_distance`
        of `query`, nearest first and more frequent first on ties.

        This is a linear scan over the whole vocabulary (no edit-distance
        pruning); use BKTree for large corpora. Passing `prefix` restricts
        the scan to words under that prefix.
        """
        if max_distance < 0 or limit <= 0:
            return []
        start = self._root if prefix is None else self._find_node(prefix)
        if start is None:
            return []

        dist = distance_fn or damerau_levenshtein
        hits: List[FuzzySuggestion] = []
        for entry in self._iter_words(start):
            d = dist(query, entry.word, max_distance)
            if d <= max_distance:
                hits.append(FuzzySuggestion(entry.word, d, entry.frequency))

        hits.sort(key=lambda h: (h.distance, -h.frequency, h.word))
        return hits[:limit]

    # traversal -------------------------------------------------------
    def _iter_words(self, node: TrieNode) -> Iterator[Suggestion]:
        """DFS over the subtree at `node`, yielding every complete word."""
        stack = [node]
        while stack:
            n = stack.pop()
            if n.is_end_of_word:
                yield Suggestion(n.word, n.frequency)
            stack.extend(n.children.values())

    def words(self) -> List[Suggestion]:
        """All stored (word, frequency) pairs, unsorted."""
        return list(self._iter_words(self._root))

    # convenience -----------------------------------------------------
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def clear(self) -> None:
        self._root = TrieNode()
        self._size = 0
