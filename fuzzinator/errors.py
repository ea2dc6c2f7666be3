"""Exception types raised by Fuzzinator.

Only two failures can come out of the scoring pipeline itself:

- ConfigurationRangeError: a configuration value is out of range
  (currently only ``capital_distance``).
- InvalidFormulaError: the configured distance formula is not "l1" or "l2".

UnknownPresetError is raised by the preset registry, outside the pipeline.
"""

from typing import List, Optional


class FuzzinatorError(Exception):
    """Base class for all Fuzzinator errors."""


class ConfigurationRangeError(FuzzinatorError, ValueError):
    """Raised when a configuration value falls outside its allowed range."""


class InvalidFormulaError(FuzzinatorError, ValueError):
    """Raised when a distance formula other than "l1" or "l2" is requested.

    Attributes:
        formula: The offending formula value.
    """

    def __init__(self, formula: object) -> None:
        self.formula = formula
        super().__init__(f'Formula must be either "l1" or "l2" not {formula!r}')


class UnknownPresetError(FuzzinatorError, KeyError):
    """Raised when a preset name is not registered.

    Attributes:
        name: The requested preset name.
        suggestions: Registered names close to ``name``, best first.
    """

    def __init__(self, name: str, suggestions: Optional[List[str]] = None) -> None:
        self.name = name
        self.suggestions = suggestions or []
        super().__init__(name)

    def __str__(self) -> str:
        message = f"Unknown preset: {self.name!r}"
        if self.suggestions:
            message += f" (did you mean {', '.join(repr(s) for s in self.suggestions)}?)"
        return message
