"""
Value objects produced and consumed by the ranking step.

This module contains the following dataclasses:
- SearchParams: Arguments for a single ranking request
- RankedString: One candidate string annotated with its ranking outcome
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class SearchParams:
    """Arguments for Fuzzinator.search()."""
    root: str                          # String the candidates are compared against
    space: Sequence[str]               # Candidates, in input order (duplicates allowed)
    threshold: Optional[float] = None  # Keep distance <= threshold; None/0 keeps all
    sort: bool = True                  # Order ascending by distance (stable)


@dataclass(frozen=True)
class RankedString:
    """Immutable snapshot of one candidate's ranking outcome."""
    value: str                         # Candidate string
    vector: Tuple[float, ...]          # Encoded vector of the candidate
    distance: float                    # Distance from the root vector
    score: float                       # Distance bounded into (0, 1]

    def __str__(self) -> str:
        return self.value
