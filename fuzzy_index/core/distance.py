# distance.py
# Edit distances used by the fuzzy indexes.
# - damerau_levenshtein: insert/delete/substitute + adjacent transposition (default metric)
# - levenshtein: classic three-operation distance, usable as a drop-in metric
# Both take an optional cap (max_distance). A capped call never returns more than
# max_distance + 1, and bails out early once the cap is provably exceeded.

from typing import Callable, Dict, Optional

DistanceFn = Callable[..., int]


def _clamp_cap(max_distance: Optional[int]) -> Optional[int]:
    if max_distance is None:
        return None
    return max_distance if max_distance > 0 else 0


def damerau_levenshtein(a: str, b: str, max_distance: Optional[int] = None) -> int:
    """
    Damerau-Levenshtein distance (optimal string alignment variant).

    Swapping two adjacent characters counts as one edit, so
    damerau_levenshtein("ab", "ba") == 1 where plain Levenshtein gives 2.

    Memory is three rolling rows sized to the longer string; the shorter
    string drives the outer loop. With max_distance set:
     - a length difference above the cap returns max_distance + 1 immediately
     - the loop stops once two consecutive rows are entirely above the cap
     - any result above the cap is reported as max_distance + 1
    A negative cap is treated as 0.

    Not a true metric: the alignment never edits inside a swapped pair, so
    the triangle inequality can fail (d("ca", "abc") == 3, yet "ca" -> "ac"
    -> "abc" costs 2). A BKTree built on it can miss matches; use
    levenshtein when search must be complete.
    """
    if a == b:
        return 0

    cap = _clamp_cap(max_distance)

    # swap the operands themselves so the cap check is symmetric
    if len(a) > len(b):
        a, b = b, a
    la, lb = len(a), len(b)

    if cap is not None and lb - la > cap:
        return cap + 1
    if la == 0:
        return lb

    two_back = [0] * (lb + 1)
    prev = list(range(lb + 1))
    curr = [0] * (lb + 1)
    prev_min = 0

    for i in range(1, la + 1):
        ca = a[i - 1]
        curr[0] = i
        row_min = i

        for j in range(1, lb + 1):
            cb = b[j - 1]
            val = prev[j] + 1  # deletion
            ins = curr[j - 1] + 1
            if ins < val:
                val = ins
            sub = prev[j - 1] + (0 if ca == cb else 1)
            if sub < val:
                val = sub
            # adjacent transposition: ..xy -> ..yx
            if i > 1 and j > 1 and ca == b[j - 2] and a[i - 2] == cb:
                trans = two_back[j - 2] + 1
                if trans < val:
                    val = trans
            curr[j] = val
            if val < row_min:
                row_min = val

        # every later cell derives from one of the last two rows
        if cap is not None and row_min > cap and prev_min > cap:
            return cap + 1

        two_back, prev, curr = prev, curr, two_back
        prev_min = row_min

    dist = prev[lb]
    if cap is not None and dist > cap:
        return cap + 1
    return dist


def levenshtein(a: str, b: str, max_distance: Optional[int] = None) -> int:
    """
    Plain Levenshtein (insert, delete, substitute). A true metric, so it is
    the safe choice for BKTree when no match may be skipped. Same cap
    contract as damerau_levenshtein, with a single-row cutoff.
    """
    if a == b:
        return 0

    cap = _clamp_cap(max_distance)

    # b is the shorter one; rows are sized to it
    if len(a) < len(b):
        a, b = b, a

    la, lb = len(a), len(b)

    # each surplus character costs at least one insertion
    if cap is not None and la - lb > cap:
        return cap + 1
    if lb == 0:
        return la

    prev = list(range(lb + 1))

    for i in range(1, la + 1):
        ca = a[i - 1]
        curr = [i]
        row_min = i

        for j in range(1, lb + 1):
            ins = curr[j - 1] + 1
            delete = prev[j] + 1
            replace = prev[j - 1] + (0 if ca == b[j - 1] else 1)
            val = ins if ins < delete else delete
            if replace < val:
                val = replace
            curr.append(val)
            if val < row_min:
                row_min = val

        # later rows only grow from this one
        if cap is not None and row_min > cap:
            return cap + 1
        prev = curr

    dist = prev[-1]
    if cap is not None and dist > cap:
        return cap + 1
    return dist


METRICS: Dict[str, DistanceFn] = {
    "damerau": damerau_levenshtein,
    "levenshtein": levenshtein,
}


def get_metric(name: str) -> DistanceFn:
    """Look up a distance function by its config name."""
    try:
        return METRICS[name]
    except KeyError:
        choices = ", ".join(sorted(METRICS))
        raise ValueError(f"unknown metric {name!r} (choose from: {choices})") from None


def metric_name(fn: DistanceFn) -> str:
    for name, candidate in METRICS.items():
        if candidate is fn:
            return name
    return getattr(fn, "__name__", "custom")
