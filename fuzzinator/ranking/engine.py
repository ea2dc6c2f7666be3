"""Fuzzinator engine implementation.

This module provides the Fuzzinator class which ties the scoring pipeline
together: it owns one configuration, the scalar table derived from it and
the encoder using both, and exposes encoding, distance and ranking.

Example:
    >>> from fuzzinator.ranking import Fuzzinator
    >>> engine = Fuzzinator()
    >>> results = engine.rank("cat", ["dog", "bat", "cat"])
    >>> [str(r) for r in results]
    ['cat', 'bat', 'dog']
"""

from typing import Any, List, Mapping, NamedTuple, Optional, Sequence, Union

from fuzzinator.models import FuzzyConfig, RankedString, SearchParams
from fuzzinator.scoring import (
    DEFAULT_SCORE_SCALER,
    ScalarTable,
    Vector,
    VectorEncoder,
    bound_distance,
    distance,
)

ConfigArgument = Union[FuzzyConfig, Mapping[str, Any], None]


class _EngineState(NamedTuple):
    """Configuration and everything derived from it, replaced as a unit."""
    config: FuzzyConfig
    table: ScalarTable
    encoder: VectorEncoder


class Fuzzinator:
    """Configurable fuzzy string-similarity engine.

    The engine is stateless beyond its configuration: nothing computed by
    one call is reused by another. Reconfiguring swaps the whole state in
    one assignment, so a concurrent reader never sees a configuration paired
    with another configuration's scalar table.

    Attributes:
        config: The active FuzzyConfig.
        scalars: The active ScalarTable.

    Example:
        >>> engine = Fuzzinator({"scoring": {"formula": "l1"}})
        >>> engine.compute_distance("cat", "bat")
        1
    """

    def __init__(self, config: ConfigArgument = None) -> None:
        """Initialize the engine.

        Args:
            config: None for the defaults, a complete FuzzyConfig, or a
                partial override mapping merged onto the defaults.

        Raises:
            ConfigurationRangeError: If capital_distance is outside [0, 1).
        """
        self._state = self._build_state(_resolve_config(config))

    @property
    def config(self) -> FuzzyConfig:
        return self._state.config

    @property
    def scalars(self) -> ScalarTable:
        return self._state.table

    def reconfigure(self, config: ConfigArgument) -> None:
        """Replace the configuration and rebuild the scalar table.

        A mapping is merged onto the engine's current configuration; a
        FuzzyConfig replaces it outright.

        Raises:
            ConfigurationRangeError: If capital_distance is outside [0, 1).
                The engine keeps its previous state.
        """
        if isinstance(config, FuzzyConfig):
            new_config = config
        else:
            new_config = self._state.config.merged(config)
        self._state = self._build_state(new_config)

    def set_scalars(self, scalars: Mapping[str, float]) -> None:
        """Replace the whole scalar table with a caller-supplied mapping.

        Characters absent from ``scalars`` still resolve to the configured
        ``unrecognized_default``.
        """
        config = self._state.config
        table = ScalarTable(scalars, unrecognized_default=config.scalars.unrecognized_default)
        self._state = _EngineState(config, table, VectorEncoder(table, config.scoring.multiplier))

    def compute_vector(self, text: str) -> Vector:
        """Encode one string into a vector."""
        return self._state.encoder.encode(text)

    def compute_vectors(self, texts: Sequence[str]) -> List[Vector]:
        """Encode a sequence of strings, preserving order."""
        return self._state.encoder.encode_all(texts)

    def compute_distance(
        self,
        vector1: Union[Vector, str],
        vector2: Union[Vector, str],
    ) -> float:
        """Compute the distance between two strings or vectors, in any mix.

        Raises:
            InvalidFormulaError: If the configured formula is not "l1" or "l2".
        """
        state = self._state
        if isinstance(vector1, str):
            vector1 = state.encoder.encode(vector1)
        if isinstance(vector2, str):
            vector2 = state.encoder.encode(vector2)
        return distance(vector1, vector2, state.config.scoring.formula)

    def rank(
        self,
        root: str,
        space: Sequence[str],
        threshold: Optional[float] = None,
        sort: bool = True,
    ) -> List[RankedString]:
        """Rank candidate strings by distance from ``root``.

        Args:
            root: The string candidates are compared against.
            space: Candidate strings. Duplicates are kept.
            threshold: Keep only results with distance <= threshold. None
                and 0 both mean no filtering.
            sort: Order results ascending by distance. Ties keep their
                input order.

        Returns:
            List of RankedString, possibly empty.

        Raises:
            InvalidFormulaError: If the configured formula is not "l1" or "l2".
        """
        state = self._state
        formula = state.config.scoring.formula
        root_vector = state.encoder.encode(root)
        space_vectors = state.encoder.encode_all(space)

        results = []
        for value, vector in zip(space, space_vectors):
            dist = distance(root_vector, vector, formula)
            results.append(RankedString(
                value=value,
                vector=tuple(vector),
                distance=dist,
                score=bound_distance(dist),
            ))

        # A zero threshold cannot be told apart from "no threshold"
        if threshold:
            results = [r for r in results if r.distance <= threshold]
        if sort:
            results.sort(key=lambda r: r.distance)

        return results

    def search(self, params: SearchParams) -> List[RankedString]:
        """Rank using a SearchParams bundle. See rank()."""
        return self.rank(
            root=params.root,
            space=params.space,
            threshold=params.threshold,
            sort=params.sort,
        )

    @staticmethod
    def bound(distance: float, scaler: float = DEFAULT_SCORE_SCALER) -> float:
        """Map a distance into the (0, 1] score range."""
        return bound_distance(distance, scaler)

    @staticmethod
    def _build_state(config: FuzzyConfig) -> _EngineState:
        table = ScalarTable.from_config(config.scalars)
        return _EngineState(config, table, VectorEncoder(table, config.scoring.multiplier))


def _resolve_config(config: ConfigArgument) -> FuzzyConfig:
    if isinstance(config, FuzzyConfig):
        return config
    return FuzzyConfig.from_overrides(config)
