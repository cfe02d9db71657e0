# tests/test_bktree.py
import random
import string

import pytest

from fuzzy_index.core.bktree import BKTree
from fuzzy_index.core.distance import damerau_levenshtein, levenshtein
from fuzzy_index.core.protocols import Match, MetricIndexProtocol

SWEETS = ["brigadeiro", "beijinho", "brigadeirão"]

FOODS = [
    "cake", "bake", "cakes", "cookie", "cookies", "candy", "caramel", "carrot",
    "brownie", "brownies", "bread", "breadstick", "biscuit", "tart", "torte",
    "pudding", "pie", "pies", "mousse", "muffin", "macaron", "meringue",
    "quindim", "cocada", "pamonha", "canjica", "paçoca",
] + SWEETS


def brute_force(words, query, k, fn):
    return sorted(
        (w, fn(w, query)) for w in set(words) if fn(w, query) <= k
    )


class CountingDistance:
    def __init__(self, fn=damerau_levenshtein):
        self.fn = fn
        self.calls = 0

    def __call__(self, a, b, max_distance=None):
        self.calls += 1
        return self.fn(a, b, max_distance)


@pytest.fixture
def sweets():
    return BKTree.from_words(SWEETS)


def test_end_to_end_search(sweets):
    hits = sweets.search("brigadero", 2)
    found = dict(hits)
    assert found["brigadeiro"] == 1
    assert found["brigadeirão"] == 2
    assert "beijinho" not in found
    assert hits[0] == Match("brigadeiro", 1)


def test_results_sorted_by_distance():
    tree = BKTree.from_words(FOODS)
    hits = tree.search("cake", 3)
    distances = [m.distance for m in hits]
    assert distances == sorted(distances)
    assert hits[0] == ("cake", 0)


def test_empty_tree():
    tree = BKTree()
    assert tree.search("anything", 5) == []
    assert tree.size() == 0
    assert "anything" not in tree
    assert tree.depth() == 0


def test_duplicate_insert_is_noop(sweets):
    before = sweets.search("brigadero", 2)
    sweets.insert("brigadeiro")
    sweets.insert("beijinho")
    assert sweets.size() == 3
    assert len(sweets) == 3
    assert sweets.search("brigadero", 2) == before


def test_first_insert_becomes_root():
    tree = BKTree()
    tree.insert("root")
    assert tree.root.word == "root"
    assert tree.size() == 1


def test_edges_keyed_by_parent_distance():
    tree = BKTree.from_words(FOODS)
    stack = [tree.root]
    while stack:
        node = stack.pop()
        for d, child in node.children.items():
            assert damerau_levenshtein(node.word, child.word) == d
            stack.append(child)


@pytest.mark.parametrize("k", [0, 1, 2, 3])
def test_completeness_fixed_vocab(k):
    tree = BKTree.from_words(FOODS)
    for q in ["cake", "cokie", "brigadero", "pie", "bred", "mouse", "xyz", ""]:
        got = sorted(tree.search(q, k))
        assert got == brute_force(FOODS, q, k, damerau_levenshtein)


def test_completeness_independent_of_insertion_order():
    rng = random.Random(1234)
    vocab = sorted({
        "".join(rng.choice("abcde") for _ in range(rng.randint(1, 7)))
        for _ in range(300)
    })
    queries = ["".join(rng.choice("abcde") for _ in range(rng.randint(0, 7))) for _ in range(25)]
    for _ in range(3):
        rng.shuffle(vocab)
        tree = BKTree.from_words(vocab, levenshtein)
        assert tree.size() == len(vocab)
        for q in queries:
            for k in (0, 1, 2):
                assert sorted(tree.search(q, k)) == brute_force(vocab, q, k, levenshtein)


def test_search_prunes():
    rng = random.Random(7)
    vocab = {
        "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(2, 14)))
        for _ in range(500)
    }
    counter = CountingDistance()
    tree = BKTree.from_words(sorted(vocab), counter)
    target = sorted(vocab)[123]

    counter.calls = 0
    assert tree.search(target, 0) == [(target, 0)]
    # exact search follows a single edge per level
    assert counter.calls <= tree.depth()
    assert counter.calls < tree.size()


def test_negative_max_distance():
    tree = BKTree.from_words(FOODS)
    assert tree.search("cake", -1) == []


def test_contains_and_words():
    tree = BKTree.from_words(FOODS)
    assert "quindim" in tree
    assert "quindin" not in tree
    assert sorted(tree.words()) == sorted(set(FOODS))


def test_pluggable_metric():
    tree = BKTree.from_words(["ab", "ba", "abc"], levenshtein)
    assert dict(tree.search("ab", 1)) == {"ab": 0, "abc": 1}
    dl = BKTree.from_words(["ab", "ba", "abc"])
    assert dict(dl.search("ab", 1)) == {"ab": 0, "ba": 1, "abc": 1}


def test_clear():
    tree = BKTree.from_words(SWEETS)
    tree.clear()
    assert tree.size() == 0
    assert tree.search("brigadeiro", 3) == []


def test_satisfies_protocol(sweets):
    assert isinstance(sweets, MetricIndexProtocol)


def test_default_metric_can_miss_across_a_transposition():
    # OSA breaks the triangle inequality: d(ca, abc) = 3 > d(ca, ac) + d(ac, abc) = 2
    vocab = ["ca", "ac", "abc", "acb", "bac"]
    assert damerau_levenshtein("ac", "abc") == 1
    tree = BKTree.from_words(vocab)
    assert "abc" not in dict(tree.search("ac", 1))

    complete = BKTree.from_words(vocab, levenshtein)
    assert sorted(complete.search("ac", 1)) == brute_force(vocab, "ac", 1, levenshtein)
    assert "abc" in dict(complete.search("ac", 1))
