import itertools

import pytest

from editrank.ranking.distance import get_distance_fn, levenshtein

WORDS = ["", "a", "ab", "abc", "kitten", "sitting", "smitten", "flaw", "lawn", "Kitten"]


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("kitten", "sitting", 3),
        ("kitten", "smitten", 2),
        ("flaw", "lawn", 2),
        ("cow", "bowl", 2),
        ("ab", "ba", 2),
        ("Kitten", "kitten", 1),
        ("", "", 0),
    ],
)
def test_known_distances(a: str, b: str, expected: int) -> None:
    assert levenshtein(a, b) == expected


def test_identity() -> None:
    for w in WORDS:
        assert levenshtein(w, w) == 0


def test_empty_side_is_other_length() -> None:
    for w in WORDS:
        assert levenshtein("", w) == len(w)
        assert levenshtein(w, "") == len(w)


def test_symmetric() -> None:
    for a, b in itertools.product(WORDS, repeat=2):
        assert levenshtein(a, b) == levenshtein(b, a)


def test_triangle_inequality() -> None:
    for a, b, c in itertools.product(WORDS, repeat=3):
        assert levenshtein(a, c) <= levenshtein(a, b) + levenshtein(b, c)


def test_transposition_is_two_edits() -> None:
    assert levenshtein("abcd", "abdc") == 2


def test_code_points_are_atomic() -> None:
    assert levenshtein("café", "cafe") == 1
    assert levenshtein("\U0001f600x", "x") == 1


def test_rapidfuzz_engine_agrees_with_builtin() -> None:
    rf = get_distance_fn("rapidfuzz")
    for a, b in itertools.product(WORDS, repeat=2):
        assert rf(a, b) == levenshtein(a, b)


def test_unknown_engine() -> None:
    with pytest.raises(ValueError, match="unknown distance engine"):
        get_distance_fn("soundex")
