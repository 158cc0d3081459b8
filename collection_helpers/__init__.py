"""Top-level package for `collection_helpers`.

This module exposes package metadata and primary exports.
"""

from .__about__ import __version__
from .errors import InvalidConfigurationError
from .utils import (
    RandomSource,
    greet,
    has_sufficient_items,
    make_random,
    missing_items,
    shuffled,
    split_fixed_count,
    split_fixed_count_set,
    split_fixed_size,
)

__all__ = [
    "InvalidConfigurationError",
    "RandomSource",
    "__version__",
    "greet",
    "has_sufficient_items",
    "make_random",
    "missing_items",
    "shuffled",
    "split_fixed_count",
    "split_fixed_count_set",
    "split_fixed_size",
]
