"""Utility helpers for `collection_helpers`.

Reusable, non-IO core utilities live here.
"""

from .helpers import greet
from .partition import shuffled, split_fixed_count, split_fixed_count_set, split_fixed_size
from .randomness import RandomSource, make_random
from .sufficiency import has_sufficient_items, missing_items

__all__ = [
    "RandomSource",
    "greet",
    "has_sufficient_items",
    "make_random",
    "missing_items",
    "shuffled",
    "split_fixed_count",
    "split_fixed_count_set",
    "split_fixed_size",
]
