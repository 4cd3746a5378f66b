"""Scaling policies."""

from enum import Enum
from typing import Iterator

from aspect_ratio.exceptions import ConfigurationError


class ScalingMode(Enum):
    """How a size is fitted to its bounds.

    ``EXACT``
        Scale to an exact size. With both dimensions bounded the aspect ratio
        is ignored, e.g. 200x200 bounded to 300x600 becomes 300x600. With a
        single dimension the other one is kept, e.g. 200x100 bounded to
        height 150 becomes 200x150.

    ``FIT``
        Fit inside ``w x h`` keeping the aspect ratio, scaling up or down as
        required: 200x200 fitted to 400x100 becomes 100x100.

    ``COVER``
        Cover ``w x h`` keeping the aspect ratio: 200x200 covering 400x100
        becomes 400x400.

    ``CONTAIN``
        Like ``FIT`` but only ever scales down: 200x200 contained in 400x400
        stays 200x200. This is the default.
    """

    EXACT = "exact"
    FIT = "fit"
    COVER = "cover"
    CONTAIN = "contain"

    @classmethod
    def iter(cls) -> Iterator["ScalingMode"]:
        """Iterate over all modes in declaration order."""
        return iter(list(cls))

    @classmethod
    def default(cls) -> "ScalingMode":
        return cls.CONTAIN

    @classmethod
    def parse(cls, name: str) -> "ScalingMode":
        """Resolve a mode from its name (case-insensitive)."""
        try:
            return cls(name.strip().lower())
        except ValueError as e:
            choices = ", ".join(mode.value for mode in cls)
            raise ConfigurationError(
                f"Unknown scaling mode {name!r}, expected one of: {choices}"
            ) from e

    def __str__(self) -> str:
        return self.value
