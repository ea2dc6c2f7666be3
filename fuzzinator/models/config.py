"""
Configuration models for the Fuzzinator scoring pipeline.

This module contains the following frozen dataclasses:
- ScalarsConfig: The recognized alphabet and how characters map to scalars
- MultiplierConfig: Multiplier growth, reduction and reset rules
- ScoringConfig: Multiplier rules plus the distance formula
- FuzzyConfig: The complete engine configuration

A FuzzyConfig is never mutated. Partial overrides are merged into a fresh
copy with FuzzyConfig.from_overrides() or FuzzyConfig.merged().
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from fuzzinator.errors import ConfigurationRangeError
from .formula import Formula

DEFAULT_CHARS: Tuple[str, ...] = (
    " ",
    "a", "e", "i", "o", "u",
    "b", "c", "d", "f", "g", "h", "j", "k", "l", "m", "n", "p", "q", "r",
    "s", "t", "v", "w", "x", "y", "z",
    "0", "1", "2", "3", "4", "5", "6", "7", "8", "9",
    "!", '"', "#", "$", "%", "&", "'", "(", ")", "*", "+", ",", "-", ".",
    "/", ":", ";", "<", "=", ">", "?", "@", "[", "]", "^", "_", "`", "{",
    "|", "}", "~",
)


@dataclass(frozen=True)
class ScalarsConfig:
    """Alphabet settings used to build the scalar table."""
    chars: Tuple[str, ...] = DEFAULT_CHARS   # Position determines the scalar
    capital_distance: float = 0.001          # Added for an unlisted uppercase variant
    unrecognized_default: float = 0          # Scalar for characters not in the table

    def __post_init__(self) -> None:
        if not isinstance(self.chars, tuple):
            object.__setattr__(self, "chars", tuple(self.chars))
        if not 0 <= self.capital_distance < 1:
            raise ConfigurationRangeError(
                f"capital_distance must be between 0 (inclusive) and 1 (exclusive), "
                f"got {self.capital_distance}"
            )


@dataclass(frozen=True)
class MultiplierConfig:
    """Running multiplier rules applied while encoding a string.

    ``reduction_delimiter`` of ``""`` reduces after every character and
    ``None`` never reduces. ``reset_delimiter`` of ``None`` never resets.
    """
    initial: float = 1
    reducer: float = 1
    reduction_delimiter: Optional[str] = ""
    reset_delimiter: Optional[str] = None
    reset_reducer: float = 1


@dataclass(frozen=True)
class ScoringConfig:
    """Encoding multiplier rules and the distance formula."""
    multiplier: MultiplierConfig = field(default_factory=MultiplierConfig)
    formula: str = Formula.L2.value

    def __post_init__(self) -> None:
        object.__setattr__(self, "formula", _formula_value(self.formula))


@dataclass(frozen=True)
class FuzzyConfig:
    """Complete configuration for a Fuzzinator engine."""
    scalars: ScalarsConfig = field(default_factory=ScalarsConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)

    @classmethod
    def from_overrides(
        cls,
        overrides: Optional[Mapping[str, Any]] = None,
        base: Optional["FuzzyConfig"] = None,
    ) -> "FuzzyConfig":
        """Merge a partial override mapping onto ``base`` (defaults if None).

        Args:
            overrides: Mapping shaped like
                ``{"scalars": {...}, "scoring": {"multiplier": {...}, "formula": ...}}``.
                Any key may be omitted.
            base: Configuration to merge onto. Defaults to DEFAULT_CONFIG.

        Returns:
            A new FuzzyConfig. ``base`` is left untouched.

        Raises:
            ConfigurationRangeError: If the merged capital_distance is outside [0, 1).
            TypeError: If the override names an unknown group or key.
        """
        return (base or DEFAULT_CONFIG).merged(overrides)

    def merged(self, overrides: Optional[Mapping[str, Any]] = None) -> "FuzzyConfig":
        """Return a copy of this config with ``overrides`` merged in.

        Merge is shallow per group: every key present in a group replaces
        the matching key, absent keys are kept. The groups are ``scalars``,
        ``scoring.multiplier`` and ``scoring.formula``.
        """
        if not overrides:
            return self

        _check_keys("configuration", overrides, ("scalars", "scoring"))

        scalars = self.scalars
        if overrides.get("scalars"):
            scalars = _replace_from(scalars, overrides["scalars"], "scalars")

        scoring = self.scoring
        scoring_overrides = overrides.get("scoring") or {}
        if scoring_overrides:
            _check_keys("scoring", scoring_overrides, ("multiplier", "formula"))
            multiplier = scoring.multiplier
            if scoring_overrides.get("multiplier"):
                multiplier = _replace_from(
                    multiplier, scoring_overrides["multiplier"], "scoring.multiplier"
                )
            formula = scoring_overrides.get("formula", scoring.formula)
            scoring = ScoringConfig(multiplier=multiplier, formula=formula)

        return FuzzyConfig(scalars=scalars, scoring=scoring)

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration in the same shape accepted by merged()."""
        multiplier = self.scoring.multiplier
        return {
            "scalars": {
                "chars": list(self.scalars.chars),
                "capital_distance": self.scalars.capital_distance,
                "unrecognized_default": self.scalars.unrecognized_default,
            },
            "scoring": {
                "multiplier": {f.name: getattr(multiplier, f.name) for f in fields(multiplier)},
                "formula": self.scoring.formula,
            },
        }


def _check_keys(group: str, overrides: Mapping[str, Any], allowed: Sequence[str]) -> None:
    """Raise TypeError if ``overrides`` holds keys outside ``allowed``."""
    unknown = sorted(set(overrides) - set(allowed))
    if unknown:
        raise TypeError(
            f"Unknown {group} key(s): {', '.join(unknown)}. "
            f"Expected one of: {', '.join(allowed)}"
        )


def _replace_from(current: Any, group_overrides: Mapping[str, Any], group: str) -> Any:
    """Apply a flat override mapping to one config group dataclass."""
    _check_keys(group, group_overrides, [f.name for f in fields(current)])
    return replace(current, **group_overrides)


def _formula_value(formula: Any) -> Any:
    # Formula members compare equal to their values; store the plain string.
    # Unknown values pass through and fail at distance time.
    if isinstance(formula, Formula):
        return formula.value
    return formula


DEFAULT_CONFIG = FuzzyConfig()
