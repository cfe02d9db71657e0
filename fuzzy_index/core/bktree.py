# bktree.py
# BK-tree (Burkhard-Keller) for approximate string lookup.
# Insert words, then query for every stored word within a given edit distance.
# - Edges are keyed by the distance between parent and child at insertion time.
# - The distance function is pluggable. Pruning assumes the triangle inequality;
#   a distance without it makes search silently miss matches. The default
#   (OSA Damerau-Levenshtein) is such a distance in rare cases.
# Insert and query walk with explicit loops/stacks (no recursion), so depth is
# only bounded by memory.

from typing import Dict, Iterable, List, Optional

from fuzzy_index.core.distance import DistanceFn, damerau_levenshtein
from fuzzy_index.core.protocols import Match


class BKTree:
    """
    BK-tree for approximate string lookup.

    Default distance is damerau_levenshtein, which can break the triangle
    inequality (see its docstring): e.g. a tree over ["ca", "ac", "abc"]
    misses "abc" for search("ac", 1). Pass distance_fn=levenshtein when
    results must be complete.
    """

    class Node:
        __slots__ = ("word", "children")

        def __init__(self, word: str):
            self.word = word
            self.children: Dict[int, "BKTree.Node"] = {}

    def __init__(self, distance_fn: Optional[DistanceFn] = None):
        self.distance_fn: DistanceFn = distance_fn or damerau_levenshtein
        self.root: Optional[BKTree.Node] = None
        self._size = 0

    @classmethod
    def from_words(
        cls, words: Iterable[str], distance_fn: Optional[DistanceFn] = None
    ) -> "BKTree":
        """Build a tree by inserting `words` in order (order shapes the tree, not the results)."""
        tree = cls(distance_fn)
        for w in words:
            tree.insert(w)
        return tree

    # insertion -------------------------------------------------------------
    def insert(self, word: str) -> None:
        """Insert a word; re-inserting an existing word is a no-op."""
        if self.root is None:
            self.root = BKTree.Node(word)
            self._size = 1
            return

        node = self.root
        while True:
            d = self.distance_fn(node.word, word)
            if d == 0:
                return
            child = node.children.get(d)
            if child is None:
                node.children[d] = BKTree.Node(word)
                self._size += 1
                return
            node = child

    # query -----------------------------------------------------------------
    def search(self, query: str, max_distance: int) -> List[Match]:
        """
        Return Match(word, distance) for every word within max_distance of
        `query`, sorted by distance then word.

        From a node at distance d only edges k with |k - d| <= max_distance
        are followed: by the triangle inequality anything below another edge
        is further than max_distance from the query.
        """
        if self.root is None or max_distance < 0:
            return []

        results: List[Match] = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            # uncapped: pruning needs the exact distance, not cap + 1
            d = self.distance_fn(query, node.word)
            if d <= max_distance:
                results.append(Match(node.word, d))

            low = d - max_distance
            high = d + max_distance
            for edge, child in node.children.items():
                if low <= edge <= high:
                    stack.append(child)

        results.sort(key=lambda m: (m.distance, m.word))
        return results

    # utilities ---------------------------------------------------------------
    def __contains__(self, word: str) -> bool:
        """Exact membership, following the single edge an insert would take."""
        node = self.root
        while node is not None:
            d = self.distance_fn(node.word, word)
            if d == 0:
                return True
            node = node.children.get(d)
        return False

    def __len__(self) -> int:
        return self._size

    def size(self) -> int:
        return self._size

    def words(self) -> List[str]:
        """Return all stored words, unsorted."""
        out: List[str] = []
        if self.root is None:
            return out
        stack = [self.root]
        while stack:
            n = stack.pop()
            out.append(n.word)
            stack.extend(n.children.values())
        return out

    def depth(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        if self.root is None:
            return 0
        deepest = 0
        stack = [(self.root, 1)]
        while stack:
            n, level = stack.pop()
            if level > deepest:
                deepest = level
            for child in n.children.values():
                stack.append((child, level + 1))
        return deepest

    def clear(self) -> None:
        """Remove all nodes."""
        self.root = None
        self._size = 0
