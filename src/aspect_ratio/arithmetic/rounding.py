"""Rounding strategies used when converting scaled dimensions back to integers."""

from enum import Enum
from typing import Protocol

import numpy as np

from aspect_ratio.exceptions import ConfigurationError


class RoundingMode(Enum):
    """Named rounding policies."""

    CEIL = "ceil"
    FLOOR = "floor"
    ROUND = "round"
    TRUNC = "trunc"


class RoundingStrategy(Protocol):
    """Protocol for rounding strategies."""

    def round(self, value: float) -> float:
        """Round a real value to an integral float."""
        ...


class Ceil:
    """Round toward positive infinity."""

    def round(self, value: float) -> float:
        return float(np.ceil(value))


class Floor:
    """Round toward negative infinity."""

    def round(self, value: float) -> float:
        return float(np.floor(value))


class Round:
    """Round to the nearest integer, halves away from zero."""

    def round(self, value: float) -> float:
        # np.rint rounds halves to even; abs(value) + 0.5 can round up in float
        magnitude = np.abs(value)
        rounded = np.floor(magnitude)
        if magnitude - rounded >= 0.5:
            rounded += 1.0
        return float(np.copysign(rounded, value))


class Trunc:
    """Round toward zero."""

    def round(self, value: float) -> float:
        return float(np.trunc(value))


class RoundingPolicy:
    """Registry resolving rounding modes to strategies."""

    _strategies: dict[RoundingMode, type[RoundingStrategy]] = {
        RoundingMode.CEIL: Ceil,
        RoundingMode.FLOOR: Floor,
        RoundingMode.ROUND: Round,
        RoundingMode.TRUNC: Trunc,
    }

    @classmethod
    def get(cls, mode: RoundingMode) -> RoundingStrategy:
        """Create the strategy registered for a rounding mode.

        Args:
            mode: Rounding mode enum

        Returns:
            Strategy instance
        """
        strategy_class = cls._strategies.get(mode)
        if strategy_class is None:
            raise ConfigurationError(f"Unknown rounding mode: {mode}")
        return strategy_class()

    @classmethod
    def parse(cls, name: str) -> RoundingMode:
        """Resolve a rounding mode from its name (case-insensitive)."""
        try:
            return RoundingMode(name.strip().lower())
        except ValueError as e:
            choices = ", ".join(mode.value for mode in RoundingMode)
            raise ConfigurationError(
                f"Unknown rounding mode {name!r}, expected one of: {choices}"
            ) from e

    @classmethod
    def register_strategy(
        cls, mode: RoundingMode, strategy_class: type[RoundingStrategy]
    ) -> None:
        """Replace the strategy registered for a rounding mode.

        ``RoundingMode`` is closed, so a custom strategy takes the place of a
        built-in one for every caller resolving that mode. Strategies that do
        not need a mode can be passed directly as ``rounding=`` instead.

        Args:
            mode: Rounding mode enum
            strategy_class: Strategy class to register
        """
        cls._strategies[mode] = strategy_class


DEFAULT_ROUNDING: RoundingStrategy = Ceil()
