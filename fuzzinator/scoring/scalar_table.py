"""Scalar table construction for Fuzzinator.

The scalar table maps each recognized character to a positive number based
on its 1-based position in the configured alphabet. Lowercase characters
whose uppercase form is not itself listed also get an uppercase entry,
offset by ``capital_distance``.

Example:
    >>> from fuzzinator.models import ScalarsConfig
    >>> table = ScalarTable.from_config(ScalarsConfig(chars=(" ", "a", "b")))
    >>> table["a"], table["A"], table.lookup("?")
    (2, 2.001, 0)
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, Sequence

from fuzzinator.models import ScalarsConfig


def build_scalars(chars: Sequence[str], capital_distance: float) -> Dict[str, float]:
    """Compute the character to scalar mapping for an alphabet.

    Args:
        chars: Ordered alphabet. Position i (0-based) gets scalar i + 1.
        capital_distance: Offset added for an unlisted uppercase variant.

    Returns:
        Dictionary mapping characters to scalars.
    """
    listed = set(chars)
    scalars: Dict[str, float] = {}

    for i, char in enumerate(chars):
        value = i + 1
        scalars[char] = value
        upper = char.upper()
        if upper in listed:
            continue
        if upper != char:
            scalars[upper] = value + capital_distance

    return scalars


class ScalarTable(Mapping):
    """Read-only character to scalar mapping with an unrecognized fallback.

    Attributes:
        unrecognized_default: Scalar returned by lookup() for characters
            absent from the table.
    """

    def __init__(self, scalars: Mapping, unrecognized_default: float = 0) -> None:
        self._scalars = MappingProxyType(dict(scalars))
        self.unrecognized_default = unrecognized_default

    @classmethod
    def from_config(cls, config: ScalarsConfig) -> "ScalarTable":
        """Build the full table for a ScalarsConfig."""
        return cls(
            build_scalars(config.chars, config.capital_distance),
            unrecognized_default=config.unrecognized_default,
        )

    def lookup(self, char: str) -> float:
        """Return the scalar for ``char``, or the unrecognized default."""
        return self._scalars.get(char, self.unrecognized_default)

    def __getitem__(self, char: str) -> float:
        return self._scalars[char]

    def __iter__(self) -> Iterator[str]:
        return iter(self._scalars)

    def __len__(self) -> int:
        return len(self._scalars)

    def __repr__(self) -> str:
        return (
            f"ScalarTable({len(self._scalars)} chars, "
            f"unrecognized_default={self.unrecognized_default})"
        )
