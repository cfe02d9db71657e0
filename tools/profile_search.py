# tools/profile_search.py
"""
Small profiling harness comparing BKTree.search against a brute-force scan.
Usage:
  python tools/profile_search.py --words 20000 --iters 200 --max-distance 1

Prints mean/median/p90 latency for both and how many distance calls the
tree needed per query on average.
"""
import argparse
import random
import statistics
import string
from typing import Dict, List

from fuzzy_index.core.bktree import BKTree
from fuzzy_index.core.distance import get_metric
from fuzzy_index.utils.logger_utils import Log
from fuzzy_index.utils.timing import timed


def synthetic_vocab(n: int, rng: random.Random) -> List[str]:
    """Random lowercase words, 3-12 chars, deduplicated."""
    seen = set()
    while len(seen) < n:
        length = rng.randint(3, 12)
        seen.add("".join(rng.choice(string.ascii_lowercase) for _ in range(length)))
    return sorted(seen)


def typo(word: str, rng: random.Random) -> str:
    """Apply one random edit so queries land near stored words."""
    i = rng.randrange(len(word))
    op = rng.choice(("sub", "del", "ins", "swap"))
    if op == "sub":
        return word[:i] + rng.choice(string.ascii_lowercase) + word[i + 1:]
    if op == "del":
        return word[:i] + word[i + 1:]
    if op == "ins":
        return word[:i] + rng.choice(string.ascii_lowercase) + word[i:]
    if i + 1 < len(word):
        return word[:i] + word[i + 1] + word[i] + word[i + 2:]
    return word


def summarize(times: List[float]) -> Dict[str, float]:
    times_sorted = sorted(times)
    return {
        "mean_ms": round(statistics.mean(times_sorted), 3),
        "median_ms": round(statistics.median(times_sorted), 3),
        "p90_ms": round(times_sorted[max(0, int(0.9 * len(times_sorted)) - 1)], 3),
        "max_ms": round(max(times_sorted), 3),
    }


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--words", type=int, default=10000, help="vocabulary size")
    parser.add_argument("--iters", type=int, default=200, help="measured queries")
    parser.add_argument("--max-distance", type=int, default=1)
    parser.add_argument("--metric", default="damerau")
    parser.add_argument("--seed", type=int, default=7)
    args = parser.parse_args()

    log = Log(level="INFO")
    rng = random.Random(args.seed)
    metric = get_metric(args.metric)

    calls = 0

    def counting(a, b, max_distance=None):
        nonlocal calls
        calls += 1
        return metric(a, b, max_distance)

    vocab = synthetic_vocab(args.words, rng)
    with log.time_block(f"build bk-tree ({len(vocab)} words)"):
        tree = BKTree.from_words(vocab, counting)
    log.info(f"tree size={tree.size()} depth={tree.depth()}")

    queries = [typo(rng.choice(vocab), rng) for _ in range(args.iters)]

    def scan(q):
        return [w for w in vocab if metric(q, w, args.max_distance) <= args.max_distance]

    bk_times, scan_times = [], []
    calls = 0
    for q in queries:
        hits, ms = timed(tree.search)(q, args.max_distance)
        bk_times.append(ms)
        expected, ms = timed(scan)(q)
        scan_times.append(ms)
        if len(hits) != len(expected):
            log.warning(f"mismatch for {q!r}: tree={len(hits)} scan={len(expected)}")

    log.info(f"bk-tree search: {summarize(bk_times)}")
    log.info(f"brute force:    {summarize(scan_times)}")
    log.metric("distance calls per query", round(calls / len(queries), 1))


if __name__ == "__main__":
    main()
