"""Formula enum for the two supported vector distance formulas.

1. L1 - sum of absolute per-position differences
2. L2 - sum of squared per-position differences (no square root)
"""

from enum import Enum


class Formula(str, Enum):
    """Distance formulas understood by the vector math."""
    L1 = "l1"    # Sum of absolute differences
    L2 = "l2"    # Squared Euclidean distance, left unrooted
