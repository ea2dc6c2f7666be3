"""Fuzzinator - Configurable fuzzy string-similarity engine.

Encodes strings into positional-weighted numeric vectors, computes L1 or
squared-L2 distances between them and ranks candidate strings against a
root string.
"""

__version__ = "1.0.0"

from .errors import (
    ConfigurationRangeError,
    FuzzinatorError,
    InvalidFormulaError,
    UnknownPresetError,
)
from .models import (
    DEFAULT_CONFIG,
    Formula,
    FuzzyConfig,
    MultiplierConfig,
    RankedString,
    ScalarsConfig,
    ScoringConfig,
    SearchParams,
)
from .ranking import Fuzzinator
from .scoring import bound_distance, distance, normalize, normalize_in_place
from .presets import TUNINGS, get_preset

__all__ = [
    "__version__",
    "ConfigurationRangeError",
    "FuzzinatorError",
    "InvalidFormulaError",
    "UnknownPresetError",
    "DEFAULT_CONFIG",
    "Formula",
    "FuzzyConfig",
    "MultiplierConfig",
    "RankedString",
    "ScalarsConfig",
    "ScoringConfig",
    "SearchParams",
    "Fuzzinator",
    "bound_distance",
    "distance",
    "normalize",
    "normalize_in_place",
    "TUNINGS",
    "get_preset",
]


def main() -> None:
    """Entry point for the Fuzzinator CLI application.

    This function is called when the `fuzzinator` command is invoked after
    package installation via pip. It imports and runs the Typer app
    from the fuzzinator.cli module.
    """
    from fuzzinator.cli import app
    app()
