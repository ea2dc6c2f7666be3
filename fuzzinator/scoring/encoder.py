"""Vector encoding for Fuzzinator.

This module provides the VectorEncoder class, which turns a string into one
vector element per character using a ScalarTable and the multiplier rules
of a MultiplierConfig.

Per character, in order:
    1. Reset: on the reset delimiter, divide the reset baseline by
       ``reset_reducer`` and restart the working multiplier from it.
    2. Look up the character's scalar.
    3. Emit ``scalar * multiplier * multiplier``.
    4. Reduce: on the reduction delimiter (or every character when it is
       ""), divide the working multiplier by ``reducer``.

Example:
    >>> from fuzzinator.models import DEFAULT_CONFIG
    >>> table = ScalarTable.from_config(DEFAULT_CONFIG.scalars)
    >>> encoder = VectorEncoder(table, DEFAULT_CONFIG.scoring.multiplier)
    >>> encoder.encode("ab")
    [2, 7]
"""

from typing import Iterable, List

from fuzzinator.models import MultiplierConfig
from .scalar_table import ScalarTable
from .vector import Vector


class VectorEncoder:
    """Encodes strings into positional-weighted vectors.

    Attributes:
        table: ScalarTable used for character lookups.
        multiplier: MultiplierConfig with growth, reduction and reset rules.
    """

    def __init__(self, table: ScalarTable, multiplier: MultiplierConfig) -> None:
        self.table = table
        self.multiplier = multiplier

    def encode(self, text: str) -> Vector:
        """Encode one string.

        Args:
            text: Any string. The empty string yields an empty vector.

        Returns:
            List with one element per character of ``text``, in order.
        """
        rules = self.multiplier
        reset_delimiter = rules.reset_delimiter
        reduction_delimiter = rules.reduction_delimiter

        multiplier = rules.initial
        reset_baseline = rules.initial
        vector: Vector = []

        for char in text:
            # Reset precedes scoring so the delimiter uses the new multiplier
            if reset_delimiter and char == reset_delimiter:
                reset_baseline /= rules.reset_reducer
                multiplier = reset_baseline

            scalar = self.table.lookup(char)
            vector.append(scalar * multiplier * multiplier)

            if reduction_delimiter is not None:
                if reduction_delimiter == "" or char == reduction_delimiter:
                    multiplier /= rules.reducer

        return vector

    def encode_all(self, texts: Iterable[str]) -> List[Vector]:
        """Encode each string, preserving order."""
        return [self.encode(text) for text in texts]
