# vocab.py - read vocabulary files
#
# Format (UTF-8), one entry per line:
#   word
#   word<TAB>weight
# Blank lines and lines starting with '#' are skipped. Words are kept as-is;
# normalizing case/accents is the caller's job. A weight of 0 is read as-is
# and counted as 1 when indexed.

from typing import List, Tuple


def load_vocabulary(path: str) -> List[Tuple[str, int]]:
    """Return [(word, weight)] in file order. Raises ValueError on a bad weight."""
    entries: List[Tuple[str, int]] = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.rstrip("\r\n")
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if "\t" in line:
                word, _, weight_txt = line.partition("\t")
                try:
                    weight = int(weight_txt.strip())
                except ValueError:
                    raise ValueError(
                        f"{path}:{lineno}: bad weight {weight_txt.strip()!r}"
                    ) from None
                if weight < 0:
                    raise ValueError(f"{path}:{lineno}: weight must not be negative")
                word = word.strip()
            else:
                word, weight = stripped, 1
            entries.append((word, weight))
    return entries
