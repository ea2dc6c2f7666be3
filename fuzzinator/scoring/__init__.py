"""Scoring package for Fuzzinator.

This package contains the numeric pipeline below the ranker:

- ScalarTable: character to scalar mapping built from a ScalarsConfig.
- VectorEncoder: string to vector encoding with multiplier rules.
- normalize / normalize_in_place / distance: vector math.
- bound_distance: distance to (0, 1] score mapping.

Example:
    >>> from fuzzinator.models import DEFAULT_CONFIG
    >>> from fuzzinator.scoring import ScalarTable, VectorEncoder, distance
    >>> table = ScalarTable.from_config(DEFAULT_CONFIG.scalars)
    >>> encoder = VectorEncoder(table, DEFAULT_CONFIG.scoring.multiplier)
    >>> distance(encoder.encode("cat"), encoder.encode("bat"), "l1")
    1
"""

from .scalar_table import ScalarTable, build_scalars
from .vector import (
    DEFAULT_SCORE_SCALER,
    Vector,
    bound_distance,
    distance,
    normalize,
    normalize_in_place,
)
from .encoder import VectorEncoder

__all__ = [
    "ScalarTable",
    "build_scalars",
    "VectorEncoder",
    "Vector",
    "DEFAULT_SCORE_SCALER",
    "bound_distance",
    "distance",
    "normalize",
    "normalize_in_place",
]
