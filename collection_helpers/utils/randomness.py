"""Random sources used by the shuffling helpers."""
from __future__ import annotations

import random
from collections.abc import MutableSequence
from typing import Any, Protocol


class RandomSource(Protocol):
    """Anything that can shuffle a mutable sequence in place.

    ``random.Random`` and ``random.SystemRandom`` both satisfy this protocol.
    """

    def shuffle(self, x: MutableSequence[Any]) -> None: ...


def make_random(seed: int | None = None) -> random.Random:
    """Build a fresh, unshared random generator.

    Args:
        seed: Optional seed. ``None`` seeds from operating system entropy.

    Returns:
        A new ``random.Random`` instance owned by the caller.
    """
    return random.Random(seed)
