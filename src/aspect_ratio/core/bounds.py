"""Optional width/height/mode constraints for scaling."""

from dataclasses import dataclass, replace
from typing import Optional

from aspect_ratio.core.mode import ScalingMode


@dataclass(frozen=True)
class Bounds:
    """Target envelope for :meth:`Size.scale`.

    Every field is optional. A missing mode means :attr:`ScalingMode.CONTAIN`.
    Nothing is validated here; invalid values surface when the engine does
    its arithmetic.

    Example:
        >>> Bounds.contain().w(300).h(300)
        Bounds(width=300, height=300, mode=<ScalingMode.CONTAIN: 'contain'>)
    """

    width: Optional[int] = None
    """Target width in pixels."""

    height: Optional[int] = None
    """Target height in pixels."""

    mode: Optional[ScalingMode] = None
    """Scaling policy."""

    @classmethod
    def new(cls) -> "Bounds":
        """Unbounded, default mode."""
        return cls()

    @classmethod
    def fit(cls) -> "Bounds":
        return cls(mode=ScalingMode.FIT)

    @classmethod
    def cover(cls) -> "Bounds":
        return cls(mode=ScalingMode.COVER)

    @classmethod
    def contain(cls) -> "Bounds":
        return cls(mode=ScalingMode.CONTAIN)

    @classmethod
    def exact(cls) -> "Bounds":
        return cls(mode=ScalingMode.EXACT)

    @property
    def effective_mode(self) -> ScalingMode:
        """The mode, falling back to the default when unset."""
        return self.mode if self.mode is not None else ScalingMode.default()

    def with_mode(self, mode: Optional[ScalingMode]) -> "Bounds":
        """Set the scaling mode."""
        return replace(self, mode=mode)

    def w(self, width: Optional[int]) -> "Bounds":
        """Set the target width."""
        return replace(self, width=width)

    def h(self, height: Optional[int]) -> "Bounds":
        """Set the target height."""
        return replace(self, height=height)

    def max_width(self, width: Optional[int]) -> "Bounds":
        return self.w(width)

    def max_height(self, height: Optional[int]) -> "Bounds":
        return self.h(height)

    def max_dim(self, dim: Optional[int]) -> "Bounds":
        return self.max_dimension(dim)

    def max_dimension(self, dim: Optional[int]) -> "Bounds":
        """Cap width and height at the same value."""
        return self.w(dim).h(dim)
