"""Named preset configurations ("tunings").

The presets share the default alphabet and differ only in how aggressively
the multiplier decays along a string and resets at word boundaries:

- default: no decay, no reset. Every position weighs the same.
- focus_drop_far: gentle decay (reducer 1.1) with a gentle reset on spaces.
- focus_drop_near: steep decay (reducer 1.5) with a halving reset on spaces.

Implementation notes:
- TUNINGS is a read-only mapping of immutable FuzzyConfig objects.
- Name lookup suggests close names on a typo using `rapidfuzz`.
"""

from types import MappingProxyType
from typing import List, Mapping

from rapidfuzz import fuzz, process

from fuzzinator.errors import UnknownPresetError
from fuzzinator.models import DEFAULT_CONFIG, FuzzyConfig

DEFAULT_PRESET = "default"

FOCUS_DROP_FAR = FuzzyConfig.from_overrides({
    "scoring": {
        "multiplier": {
            "initial": 1,
            "reducer": 1.1,
            "reduction_delimiter": "",
            "reset_reducer": 1.1,
            "reset_delimiter": " ",
        },
    },
})

FOCUS_DROP_NEAR = FuzzyConfig.from_overrides({
    "scoring": {
        "multiplier": {
            "initial": 1,
            "reducer": 1.5,
            "reduction_delimiter": "",
            "reset_reducer": 2,
            "reset_delimiter": " ",
        },
    },
})

TUNINGS: Mapping[str, FuzzyConfig] = MappingProxyType({
    DEFAULT_PRESET: DEFAULT_CONFIG,
    "focus_drop_far": FOCUS_DROP_FAR,
    "focus_drop_near": FOCUS_DROP_NEAR,
})

# Minimum WRatio (0..100) for a registered name to be suggested.
_SUGGESTION_CUTOFF = 60.0


def suggest_presets(name: str, limit: int = 2) -> List[str]:
    """Return registered preset names similar to ``name``, best first."""
    matches = process.extract(
        name.lower(),
        list(TUNINGS),
        scorer=fuzz.WRatio,
        limit=limit,
        score_cutoff=_SUGGESTION_CUTOFF,
    )
    # `extract` returns: [(match, score, index), ...]
    return [str(match) for match, _score, _idx in matches]


def get_preset(name: str) -> FuzzyConfig:
    """Look up a preset by name.

    Hyphens are accepted in place of underscores ("focus-drop-far").

    Raises:
        UnknownPresetError: If no preset has that name. The error carries
            up to two close names as suggestions.
    """
    key = name.strip().lower().replace("-", "_")
    try:
        return TUNINGS[key]
    except KeyError:
        raise UnknownPresetError(name, suggest_presets(key)) from None
