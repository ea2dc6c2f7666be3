"""
Models package for Fuzzinator.

This package provides convenient imports for all data models:
- Formula: Enum of supported distance formulas
- ScalarsConfig, MultiplierConfig, ScoringConfig, FuzzyConfig: Engine configuration
- DEFAULT_CONFIG, DEFAULT_CHARS: Default configuration values
- SearchParams: Ranking request
- RankedString: Ranking outcome for one candidate
"""

from .formula import Formula
from .config import (
    DEFAULT_CHARS,
    DEFAULT_CONFIG,
    FuzzyConfig,
    MultiplierConfig,
    ScalarsConfig,
    ScoringConfig,
)
from .data_models import RankedString, SearchParams

__all__ = [
    "Formula",
    "DEFAULT_CHARS",
    "DEFAULT_CONFIG",
    "FuzzyConfig",
    "MultiplierConfig",
    "ScalarsConfig",
    "ScoringConfig",
    "RankedString",
    "SearchParams",
]
