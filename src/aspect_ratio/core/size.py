"""Integral sizes and the scaling engine."""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Union

from aspect_ratio import constants
from aspect_ratio.arithmetic.cast import checked_cast
from aspect_ratio.arithmetic.ops import checked_div, checked_mul
from aspect_ratio.arithmetic.rounding import (
    DEFAULT_ROUNDING,
    RoundingMode,
    RoundingPolicy,
    RoundingStrategy,
)
from aspect_ratio.core.bounds import Bounds
from aspect_ratio.core.config import ScalingConfig
from aspect_ratio.core.factor import (
    NonUniformScalingFactor,
    ScalingFactor,
    UniformScalingFactor,
    factor_components,
)
from aspect_ratio.core.mode import ScalingMode
from aspect_ratio.exceptions import DivisionError, EmptySizeError, ShapeError

logger = logging.getLogger(__name__)

Rounding = Union[RoundingStrategy, RoundingMode, None]


def _resolve_rounding(rounding: Rounding) -> RoundingStrategy:
    if rounding is None:
        return DEFAULT_ROUNDING
    if isinstance(rounding, RoundingMode):
        return RoundingPolicy.get(rounding)
    return rounding


def _to_float(value: Union[int, float]) -> float:
    return checked_cast(value, constants.FLOAT_DTYPE)


def _to_dimension(value: Union[int, float]) -> int:
    return checked_cast(value, constants.DIMENSION_DTYPE)


@dataclass(frozen=True, order=True)
class Size:
    """Width and height of an image, both unsigned 32-bit integers.

    Sizes are immutable; every transformation returns a new ``Size``.
    Constructing a size with a dimension that does not fit in ``uint32``
    raises :class:`~aspect_ratio.exceptions.CastError`.
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", _to_dimension(self.width))
        object.__setattr__(self, "height", _to_dimension(self.height))

    def __str__(self) -> str:
        return f"{self.width}{constants.SIZE_SEPARATOR}{self.height}"

    @classmethod
    def new(cls, width: int, height: int) -> "Size":
        return cls(width, height)

    @classmethod
    def from_shape(cls, shape: Sequence[int]) -> "Size":
        """Create a size from an array shape laid out as ``(height, width, ...)``.

        Raises:
            ShapeError: If the shape has fewer than two axes
        """
        if len(shape) < 2:
            raise ShapeError(f"Shape {tuple(shape)!r} has fewer than two dimensions")
        height, width = shape[0], shape[1]
        return cls(int(width), int(height))

    @classmethod
    def coerce(cls, value: Union["Size", Sequence[int]]) -> "Size":
        """Accept a ``Size`` or a ``(width, height)`` pair."""
        if isinstance(value, Size):
            return value
        width, height = value
        return cls(width, height)

    def as_tuple(self) -> tuple[int, int]:
        return self.width, self.height

    def w(self, width: int) -> "Size":
        """Return a copy with a new width."""
        return replace(self, width=width)

    def h(self, height: int) -> "Size":
        """Return a copy with a new height."""
        return replace(self, height=height)

    def with_width(self, width: int) -> "Size":
        return self.w(width)

    def with_height(self, height: int) -> "Size":
        return self.h(height)

    def max_dim(self) -> int:
        """Larger of width and height."""
        return max(self.width, self.height)

    def min_dim(self) -> int:
        """Smaller of width and height."""
        return min(self.width, self.height)

    def aspect_ratio(self) -> float:
        """Compute the aspect ratio ``width / height``.

        Raises:
            DivisionError: If either dimension is zero
        """
        if self.width == 0:
            raise DivisionError(
                f"Degenerate size {self} has no aspect ratio", self.width, self.height
            )
        return checked_div(_to_float(self.width), _to_float(self.height))

    def scale(self, bounds: Bounds, rounding: Rounding = None) -> "Size":
        """Scale this size to fit the given bounds.

        A missing bound is filled in with the current dimension and then
        re-derived from the aspect ratio by the scaling mode.

        Args:
            bounds: Target constraints
            rounding: Rounding strategy or mode for scaled dimensions (default: ceil)

        Returns:
            The scaled size

        Raises:
            ArithmeticFailure: If an arithmetic step fails (e.g. division by zero)
        """
        mode = bounds.effective_mode

        if bounds.width is None and bounds.height is None:
            logger.debug("Scaling %s unbounded, keeping size", self)
            return self
        if bounds.width is None:
            target = Size(self.width, bounds.height)
        elif bounds.height is None:
            target = Size(bounds.width, self.height)
        else:
            target = Size(bounds.width, bounds.height)

        return self.scale_to(target, mode, rounding=rounding)

    def scale_with(self, bounds: Bounds, config: Optional[ScalingConfig] = None) -> "Size":
        """Scale to bounds using engine settings.

        The config's mode applies only when ``bounds`` has none.

        Raises:
            EmptySizeError: If the result has a zero dimension and the config
                disallows empty sizes
            ArithmeticFailure: If an arithmetic step fails
        """
        config = config or ScalingConfig()
        if bounds.mode is None and config.mode is not None:
            bounds = bounds.with_mode(config.mode)

        scaled = self.scale(bounds, rounding=config.rounding_strategy)
        if not config.allow_empty and scaled.min_dim() == 0:
            raise EmptySizeError(f"Scaling {self} to {bounds} yields empty size {scaled}", self)
        return scaled

    def scale_to(
        self,
        size: Union["Size", Sequence[int]],
        mode: ScalingMode,
        rounding: Rounding = None,
    ) -> "Size":
        """Scale this size towards a target size.

        ``EXACT`` returns the target as is. All other modes derive a scaling
        factor and apply it, so the aspect ratio is kept.

        Raises:
            ArithmeticFailure: If an arithmetic step fails
        """
        target = Size.coerce(size)
        if mode is ScalingMode.EXACT:
            return target

        factor = self.scaling_factor(target, mode)
        sx, sy = factor_components(factor)
        scaled = self.scale_by(sx, sy, rounding=rounding)
        logger.debug("Scaled %s to %s (%s, factor %s)", self, scaled, mode, factor)
        return scaled

    def scaling_factor(
        self, size: Union["Size", Sequence[int]], mode: ScalingMode
    ) -> ScalingFactor:
        """Compute the factor that scales this size to ``size`` under ``mode``.

        Raises:
            DivisionError: If this size has a zero dimension
        """
        target = Size.coerce(size)
        width_ratio = checked_div(_to_float(target.width), _to_float(self.width))
        height_ratio = checked_div(_to_float(target.height), _to_float(self.height))

        if mode is ScalingMode.EXACT:
            return NonUniformScalingFactor(x=width_ratio, y=height_ratio)
        if mode is ScalingMode.COVER:
            return UniformScalingFactor(max(width_ratio, height_ratio))
        if mode is ScalingMode.FIT:
            return UniformScalingFactor(min(width_ratio, height_ratio))
        if mode is ScalingMode.CONTAIN:
            return UniformScalingFactor(min(width_ratio, height_ratio, 1.0))
        raise TypeError(f"Unknown scaling mode: {mode!r}")

    def scale_by(self, sx: float, sy: float, rounding: Rounding = None) -> "Size":
        """Multiply width by ``sx`` and height by ``sy``.

        Products are rounded with ``rounding`` (default: ceil) before being
        cast back to integral dimensions. A zero dimension is a valid result.

        Raises:
            MultiplicationError: If a product is not finite
            CastError: If a factor is not a finite number or a rounded
                dimension does not fit in ``uint32``
        """
        strategy = _resolve_rounding(rounding)
        sx = _to_float(sx)
        sy = _to_float(sy)
        width = checked_mul(_to_float(self.width), sx)
        height = checked_mul(_to_float(self.height), sy)
        return Size(
            _to_dimension(strategy.round(width)),
            _to_dimension(strategy.round(height)),
        )
