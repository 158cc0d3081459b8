"""Multiset containment checks."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def missing_items(
    requirements: Iterable[tuple[T, int]], checked_collection: Iterable[T]
) -> list[tuple[T, int, int]]:
    """List every requirement the checked collection does not meet.

    Items are compared with ``==`` only, so unhashable items are supported.
    Repeated requirement entries are checked independently, never summed.

    Args:
        requirements: ``(item, minimum_count)`` pairs.
        checked_collection: Observed items.

    Returns:
        ``(item, required, observed)`` for each unmet pair, in requirement
        order. Empty when everything is satisfied.
    """
    observed_items = list(checked_collection)
    shortfalls = []
    for item, minimum in requirements:
        observed = observed_items.count(item)
        if observed < minimum:
            logger.debug("Requirement %r unmet: need %d, have %d", item, minimum, observed)
            shortfalls.append((item, minimum, observed))
    return shortfalls


def has_sufficient_items(
    requirements: Iterable[tuple[T, int]], checked_collection: Iterable[T]
) -> bool:
    """Return whether ``checked_collection`` holds enough of every item.

    Stops at the first unmet requirement. Items not mentioned in
    ``requirements`` are ignored, and an empty requirement list is always
    satisfied.

    Args:
        requirements: ``(item, minimum_count)`` pairs.
        checked_collection: Observed items.

    Returns:
        True if every pair has ``count(item) >= minimum_count``.
    """
    observed_items = list(checked_collection)
    return all(observed_items.count(item) >= minimum for item, minimum in requirements)
