"""Levenshtein edit distance."""

from __future__ import annotations

from typing import Callable, Dict, Sequence

from rapidfuzz.distance import Levenshtein as rf_levenshtein

DistanceFn = Callable[[Sequence[str], Sequence[str]], int]

DEFAULT_ENGINE = "builtin"


def levenshtein(a: Sequence[str], b: Sequence[str]) -> int:
    """Minimum number of single-character inserts, deletes, or substitutions turning a into b.

    Comparison is case-sensitive and per code point. Uses two rolling rows
    sized to the shorter input.
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    n = len(b)
    prev = list(range(n + 1))
    for i in range(1, len(a) + 1):
        cur = [i] + [0] * n
        ca = a[i - 1]
        for j in range(1, n + 1):
            if ca == b[j - 1]:
                cur[j] = prev[j - 1]
            else:
                cur[j] = 1 + min(prev[j], cur[j - 1], prev[j - 1])
        prev = cur
    return prev[n]


def _rapidfuzz_levenshtein(a: Sequence[str], b: Sequence[str]) -> int:
    # Uniform weights: insert, delete and substitute all cost 1.
    return int(rf_levenshtein.distance(a, b, weights=(1, 1, 1)))


ENGINES: Dict[str, DistanceFn] = {
    "builtin": levenshtein,
    "rapidfuzz": _rapidfuzz_levenshtein,
}


def get_distance_fn(engine: str = DEFAULT_ENGINE) -> DistanceFn:
    try:
        return ENGINES[engine]
    except KeyError:
        raise ValueError(f"unknown distance engine: {engine!r} (choose from {', '.join(sorted(ENGINES))})") from None
