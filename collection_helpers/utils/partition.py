"""Randomized partitioning of collections into groups.

Every function copies its input, applies a uniform shuffle (Fisher-Yates,
as implemented by ``random.Random.shuffle``) and then divides the permuted
items into groups. Inputs are never mutated and the returned groups always
contain exactly the input elements, with the same multiplicities.

When no random source is passed, each call builds its own generator, so
the module holds no shared shuffle state.
"""
from __future__ import annotations

import logging
import operator
from collections.abc import Iterable, Set
from typing import Any, TypeVar

from ..errors import InvalidConfigurationError
from .randomness import RandomSource, make_random

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _require_positive(name: str, value: Any) -> int:
    # bool is an int subclass but never a meaningful group parameter
    if isinstance(value, bool):
        raise InvalidConfigurationError(name, value)
    try:
        number = operator.index(value)
    except TypeError:
        raise InvalidConfigurationError(name, value) from None
    if number < 1:
        raise InvalidConfigurationError(name, value)
    return number


def shuffled(collection: Iterable[T], rng: RandomSource | None = None) -> list[T]:
    """Return a uniformly shuffled copy of ``collection``.

    Args:
        collection: Items to shuffle. Any iterable is accepted.
        rng: Random source to draw from. A fresh generator is used if omitted.

    Returns:
        A new list holding the same items in random order.
    """
    items = list(collection)
    (rng if rng is not None else make_random()).shuffle(items)
    return items


def split_fixed_size(
    collection: Iterable[T], chunk_size: int, rng: RandomSource | None = None
) -> list[list[T]]:
    """Shuffle ``collection`` and slice it into groups of ``chunk_size``.

    Groups are consecutive slices of the shuffled items. The last group holds
    the remainder and may be smaller, so ``ceil(n / chunk_size)`` groups are
    returned. An empty collection yields no groups.

    Args:
        collection: Items to partition.
        chunk_size: Maximum number of items per group, at least 1.
        rng: Random source to draw from. A fresh generator is used if omitted.

    Returns:
        The list of groups.

    Raises:
        InvalidConfigurationError: If ``chunk_size`` is not a positive integer.
    """
    size = _require_positive("chunk_size", chunk_size)
    items = shuffled(collection, rng)
    groups = [items[start : start + size] for start in range(0, len(items), size)]
    logger.debug(
        "Split %d items into %d groups of at most %d", len(items), len(groups), size
    )
    return groups


def split_fixed_count(
    collection: Iterable[T], parts: int, rng: RandomSource | None = None
) -> list[list[T]]:
    """Shuffle ``collection`` and deal it round-robin into ``parts`` groups.

    The item at shuffled position ``i`` goes to group ``i % parts``. Exactly
    ``parts`` groups are returned; their sizes differ by at most one, with
    the larger groups first. An empty collection yields ``parts`` empty
    groups.

    Args:
        collection: Items to partition.
        parts: Number of groups, at least 1.
        rng: Random source to draw from. A fresh generator is used if omitted.

    Returns:
        The list of groups.

    Raises:
        InvalidConfigurationError: If ``parts`` is not a positive integer.
    """
    count = _require_positive("parts", parts)
    items = shuffled(collection, rng)
    groups: list[list[T]] = [[] for _ in range(count)]
    for index, item in enumerate(items):
        groups[index % count].append(item)
    logger.debug("Dealt %d items into %d groups", len(items), count)
    return groups


def split_fixed_count_set(
    items: Set[T], parts: int, rng: RandomSource | None = None
) -> list[list[T]]:
    """Deal the members of a set round-robin into ``parts`` groups.

    The set is enumerated in its own (unspecified) iteration order before
    shuffling, so the only guarantee is that every member lands in exactly
    one group. Group sizes follow :func:`split_fixed_count`.

    Args:
        items: Unique items to partition.
        parts: Number of groups, at least 1.
        rng: Random source to draw from. A fresh generator is used if omitted.

    Returns:
        The list of groups.

    Raises:
        InvalidConfigurationError: If ``parts`` is not a positive integer.
    """
    return split_fixed_count(list(items), parts, rng)
