"""Ranking package for Fuzzinator.

This package contains the Fuzzinator engine, which encodes strings,
computes distances and ranks candidate strings against a root string.

Example:
    >>> from fuzzinator.ranking import Fuzzinator
    >>> engine = Fuzzinator()
    >>> for result in engine.rank("cat", ["cat", "bat", "dog"]):
    ...     print(f"{result.value}: {result.score:.2f}")
"""

from .engine import Fuzzinator

__all__ = [
    "Fuzzinator",
]
