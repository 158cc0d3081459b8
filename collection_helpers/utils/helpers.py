"""General-purpose helper utilities.

Functions here are side-effect free and reusable across the package. They
use Google style docstrings.
"""
from __future__ import annotations

#: Display name interpolated into greetings.
LIBRARY_NAME = "Collection Helpers"


def greet(name: str) -> str:
    """Return the library's greeting for ``name``.

    The name is interpolated verbatim; no trimming or defaulting is applied.

    Args:
        name: Name to greet.

    Returns:
        A greeting string addressing the provided name.
    """
    return f"Hello, {name}! Welcome to {LIBRARY_NAME}."
