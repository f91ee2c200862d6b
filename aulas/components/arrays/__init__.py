"""
Arrays component - aggregations over sequences and text.
"""

from ._impl import (
    count_equal,
    count_letters,
    count_word,
    most_frequent_word,
    smallest_value,
    sum_of_odds,
)

__all__ = [
    "count_equal",
    "count_letters",
    "count_word",
    "most_frequent_word",
    "smallest_value",
    "sum_of_odds",
]
