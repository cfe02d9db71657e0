"""fuzzy_index - typo-tolerant search and autocomplete over a word list."""

from fuzzy_index.core import (
    BKTree,
    FuzzyMatcher,
    FuzzySuggestion,
    Match,
    PrefixTrie,
    Suggestion,
    damerau_levenshtein,
    levenshtein,
)

__version__ = "0.1.0"

__all__ = [
    "BKTree",
    "FuzzyMatcher",
    "FuzzySuggestion",
    "Match",
    "PrefixTrie",
    "Suggestion",
    "damerau_levenshtein",
    "levenshtein",
]
