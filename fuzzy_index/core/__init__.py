"""
fuzzy_index.core

Data structures behind the fuzzy matcher:
 - edit distances (Damerau-Levenshtein, Levenshtein) with early-exit caps
 - BKTree: metric-tree index for "all words within distance k"
 - PrefixTrie: prefix lookup, frequency-ranked and fuzzy suggestions
 - FuzzyMatcher: facade owning one of each over a shared vocabulary
"""

from .distance import damerau_levenshtein, levenshtein, get_metric
from .protocols import Match, Suggestion, FuzzySuggestion, IndexStats
from .bktree import BKTree
from .trie import PrefixTrie, TrieNode
from .matcher import FuzzyMatcher

__all__ = [
    "damerau_levenshtein",
    "levenshtein",
    "get_metric",
    "Match",
    "Suggestion",
    "FuzzySuggestion",
    "IndexStats",
    "BKTree",
    "PrefixTrie",
    "TrieNode",
    "FuzzyMatcher",
]
