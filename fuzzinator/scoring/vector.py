"""Vector math for Fuzzinator.

Vectors are plain lists of floats. This module provides:
- normalize(): zero-pad two vectors to equal length, returning copies
- normalize_in_place(): zero-pad the shorter of two vectors in place
- distance(): L1 or unrooted L2 distance between two vectors
- bound_distance(): map a distance into the (0, 1] score range
"""

from typing import List, Sequence, Tuple

from fuzzinator.errors import InvalidFormulaError
from fuzzinator.models import Formula

Vector = List[float]

DEFAULT_SCORE_SCALER = 10


def normalize(vector1: Sequence[float], vector2: Sequence[float]) -> Tuple[Vector, Vector]:
    """Return copies of both vectors right-padded with zeros to equal length.

    Args:
        vector1: First vector.
        vector2: Second vector.

    Returns:
        Tuple of two new lists, both of length max(len(vector1), len(vector2)).
    """
    v1, v2 = list(vector1), list(vector2)
    normalize_in_place(v1, v2)
    return v1, v2


def normalize_in_place(vector1: Vector, vector2: Vector) -> None:
    """Right-pad the shorter of two vectors with zeros, in place.

    The longer vector is never touched. Vectors of equal length are left
    unchanged.
    """
    shorter = vector2 if len(vector1) > len(vector2) else vector1
    shorter.extend([0.0] * abs(len(vector1) - len(vector2)))


def distance(
    vector1: Sequence[float],
    vector2: Sequence[float],
    formula: str = Formula.L2.value,
) -> float:
    """Compute the distance between two vectors.

    Vectors of unequal length are normalized first; the inputs are not
    modified.

    Args:
        vector1: First vector.
        vector2: Second vector.
        formula: "l1" (sum of absolute differences) or "l2" (sum of squared
            differences, without the square root).

    Returns:
        The distance. Two empty vectors are at distance 0.

    Raises:
        InvalidFormulaError: If ``formula`` is not "l1" or "l2".
    """
    if formula == Formula.L2:
        diff = _pairwise(vector1, vector2)
        return sum((a - b) ** 2 for a, b in diff)
    elif formula == Formula.L1:
        diff = _pairwise(vector1, vector2)
        return sum(abs(a - b) for a, b in diff)
    else:
        raise InvalidFormulaError(formula)


def _pairwise(vector1: Sequence[float], vector2: Sequence[float]):
    if len(vector1) != len(vector2):
        vector1, vector2 = normalize(vector1, vector2)
    return zip(vector1, vector2)


def bound_distance(distance: float, scaler: float = DEFAULT_SCORE_SCALER) -> float:
    """Map a non-negative distance into the (0, 1] score range.

    score = 1 / (1 + distance / scaler); 1.0 only at distance 0 and strictly
    decreasing as distance grows, for any positive ``scaler``.
    """
    return 1 / (1 + (distance / scaler))
