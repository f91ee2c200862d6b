"""
Array helpers - small aggregations over numbers, words and text.

Functional Core - pure functions, no I/O.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from aulas.domain.errors import InvalidArgumentError


def _require(value: object, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{name} is None")


def smallest_value(values: Sequence[float]) -> float:
    """Smallest element of a non-empty sequence, e.g. the lowest temperature."""
    _require(values, "values")
    if len(values) == 0:
        raise InvalidArgumentError("values must not be empty")

    smallest = values[0]
    for value in values[1:]:
        if value < smallest:
            smallest = value
    return smallest


def sum_of_odds(values: Sequence[int]) -> int:
    """Sum of the odd elements (0 when there are none)."""
    _require(values, "values")
    return sum(value for value in values if value % 2 != 0)


def count_equal(values: Sequence[float], target: float) -> int:
    """Number of elements equal to target."""
    _require(values, "values")
    return sum(1 for value in values if value == target)


def count_letters(text: str) -> int:
    """Number of alphabetic characters in text."""
    _require(text, "text")
    return sum(1 for c in text if c.isalpha())


def count_word(word: str, words: Sequence[str]) -> int:
    """Number of times word occurs in words."""
    _require(word, "word")
    _require(words, "words")
    return sum(1 for candidate in words if candidate == word)


def most_frequent_word(text: str) -> str:
    """
    Most frequent whitespace-separated word in text.

    Ties go to the word that appears first.
    """
    _require(text, "text")
    words = text.split()
    if not words:
        raise InvalidArgumentError("text must contain at least one word")

    # Counter preserves insertion order, so max() keeps the first of a tie.
    counts = Counter(words)
    return max(counts, key=lambda w: counts[w])
