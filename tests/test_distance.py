# tests/test_distance.py
import itertools

import pytest

from fuzzy_index.core.distance import (
    damerau_levenshtein,
    get_metric,
    levenshtein,
    metric_name,
)

WORDS = [
    "",
    "a",
    "ab",
    "ba",
    "abc",
    "acb",
    "cake",
    "bake",
    "ckae",
    "brigadeiro",
    "brigadero",
    "brigadeirão",
    "beijinho",
    "kitten",
    "sitting",
]


@pytest.mark.parametrize("fn", [damerau_levenshtein, levenshtein])
def test_identity_and_symmetry(fn):
    for a, b in itertools.product(WORDS, repeat=2):
        assert fn(a, b) == fn(b, a)
        assert (fn(a, b) == 0) == (a == b)


@pytest.mark.parametrize("fn", [damerau_levenshtein, levenshtein])
def test_empty_string_is_length(fn):
    for w in WORDS:
        assert fn("", w) == len(w)
        assert fn(w, "") == len(w)


def test_known_values():
    assert damerau_levenshtein("kitten", "sitting") == 3
    assert damerau_levenshtein("brigadero", "brigadeiro") == 1
    assert damerau_levenshtein("brigadero", "brigadeirão") == 2
    assert damerau_levenshtein("abc", "ca") == 3  # optimal string alignment
    assert levenshtein("kitten", "sitting") == 3


def test_transposition_is_one_edit():
    assert damerau_levenshtein("ab", "ba") == 1
    assert levenshtein("ab", "ba") == 2
    assert damerau_levenshtein("cake", "ckae") == 1
    assert damerau_levenshtein("acb", "abc") == 1


@pytest.mark.parametrize("fn", [damerau_levenshtein, levenshtein])
def test_cap_consistency(fn):
    for a, b in itertools.product(WORDS, repeat=2):
        full = fn(a, b)
        for k in range(0, 5):
            capped = fn(a, b, k)
            if full > k:
                assert capped == k + 1, (a, b, k)
            else:
                assert capped == full, (a, b, k)


def test_length_gap_short_circuits():
    # one string is much longer: answer is cap + 1 without a full DP
    assert damerau_levenshtein("a", "a" * 500, 3) == 4
    assert damerau_levenshtein("a" * 500, "a", 3) == 4
    assert damerau_levenshtein("", "abcdef", 2) == 3


def test_negative_cap_behaves_like_zero():
    assert damerau_levenshtein("same", "same", -3) == 0
    assert damerau_levenshtein("cake", "bake", -1) == 1
    assert levenshtein("cake", "bake", -1) == 1


def test_long_strings():
    a = "ab" * 300
    b = "ba" * 300
    # ab*N vs ba*N: drop the leading 'a', append a trailing 'a'
    assert levenshtein(a, b) == 2
    assert damerau_levenshtein(a, b) == 2
    assert damerau_levenshtein(a, a + "x") == 1


def test_metric_lookup():
    assert get_metric("damerau") is damerau_levenshtein
    assert get_metric("levenshtein") is levenshtein
    assert metric_name(levenshtein) == "levenshtein"
    with pytest.raises(ValueError):
        get_metric("hamming")
