"""Exception types raised by `collection_helpers`."""

from __future__ import annotations

from typing import Any


class InvalidConfigurationError(ValueError):
    """Raised when a partition parameter is zero or otherwise nonsensical.

    Attributes:
        name: Name of the offending parameter, e.g. ``"parts"``.
        value: The rejected value as supplied by the caller.
    """

    def __init__(self, name: str, value: Any) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must be a positive integer, got {value!r}")
