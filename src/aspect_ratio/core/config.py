"""Configuration for the scaling engine using the Builder pattern."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from aspect_ratio import constants
from aspect_ratio.arithmetic.rounding import RoundingMode, RoundingPolicy, RoundingStrategy
from aspect_ratio.core.mode import ScalingMode
from aspect_ratio.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScalingConfig:
    """Engine settings applied by :meth:`Size.scale_with`."""

    mode: Optional[ScalingMode] = None  # Used when the bounds carry no mode
    rounding: RoundingMode = RoundingMode.CEIL
    allow_empty: bool = True  # Permit results with a zero dimension

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.mode is not None and not isinstance(self.mode, ScalingMode):
            raise ConfigurationError(f"Invalid scaling mode: {self.mode!r}")
        if not isinstance(self.rounding, RoundingMode):
            raise ConfigurationError(f"Invalid rounding mode: {self.rounding!r}")

    @property
    def rounding_strategy(self) -> RoundingStrategy:
        return RoundingPolicy.get(self.rounding)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ScalingConfig":
        """Build a configuration from ``ASPECT_RATIO_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            ScalingConfig with unset variables left at their defaults
        """
        env = os.environ if environ is None else environ
        builder = ScalingConfigBuilder()

        rounding = env.get(constants.ENV_ROUNDING, "").strip()
        if rounding:
            builder.with_rounding(RoundingPolicy.parse(rounding))

        mode = env.get(constants.ENV_DEFAULT_MODE, "").strip()
        if mode:
            builder.with_mode(ScalingMode.parse(mode))

        config = builder.build()
        logger.debug("Scaling config from environment: %s", config)
        return config


class ScalingConfigBuilder:
    """Builder for ScalingConfig."""

    def __init__(self) -> None:
        """Initialize builder."""
        self._mode: Optional[ScalingMode] = None
        self._rounding: RoundingMode = RoundingMode.CEIL
        self._allow_empty: bool = True

    def with_mode(self, mode: Optional[ScalingMode]) -> "ScalingConfigBuilder":
        """Set the fallback scaling mode."""
        self._mode = mode
        return self

    def with_rounding(self, rounding: RoundingMode) -> "ScalingConfigBuilder":
        """Set the rounding mode."""
        self._rounding = rounding
        return self

    def with_allow_empty(self, allow: bool = True) -> "ScalingConfigBuilder":
        """Allow or reject results with a zero dimension."""
        self._allow_empty = allow
        return self

    def build(self) -> ScalingConfig:
        """Build ScalingConfig."""
        return ScalingConfig(
            mode=self._mode,
            rounding=self._rounding,
            allow_empty=self._allow_empty,
        )
