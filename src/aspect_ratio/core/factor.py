"""Scaling factors: one multiplier for both axes or one per axis."""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class NonUniformScalingFactor:
    """Independent multipliers for the x and y axis."""

    x: float = 1.0
    y: float = 1.0

    def is_uniform(self) -> bool:
        return False

    def as_uniform(self) -> Optional[float]:
        return None

    def as_non_uniform(self) -> Optional["NonUniformScalingFactor"]:
        return self


@dataclass(frozen=True)
class UniformScalingFactor:
    """A single multiplier applied to both axes."""

    value: float

    @property
    def x(self) -> float:
        return self.value

    @property
    def y(self) -> float:
        return self.value

    def is_uniform(self) -> bool:
        return True

    def as_uniform(self) -> Optional[float]:
        return self.value

    def as_non_uniform(self) -> Optional[NonUniformScalingFactor]:
        return None


ScalingFactor = Union[UniformScalingFactor, NonUniformScalingFactor]


def factor_components(factor: ScalingFactor) -> tuple[float, float]:
    """Return the ``(x, y)`` multipliers of any scaling factor.

    Raises:
        TypeError: If ``factor`` is not a known scaling factor variant
    """
    if isinstance(factor, UniformScalingFactor):
        return factor.value, factor.value
    if isinstance(factor, NonUniformScalingFactor):
        return factor.x, factor.y
    raise TypeError(f"Unknown scaling factor variant: {type(factor).__name__}")
