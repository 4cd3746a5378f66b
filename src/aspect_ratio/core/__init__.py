"""Core modules: sizes, bounds, scaling modes and factors."""

from aspect_ratio.core.bounds import Bounds
from aspect_ratio.core.config import ScalingConfig, ScalingConfigBuilder
from aspect_ratio.core.factor import (
    NonUniformScalingFactor,
    ScalingFactor,
    UniformScalingFactor,
)
from aspect_ratio.core.mode import ScalingMode
from aspect_ratio.core.size import Size

__all__ = [
    "Bounds",
    "NonUniformScalingFactor",
    "ScalingConfig",
    "ScalingConfigBuilder",
    "ScalingFactor",
    "ScalingMode",
    "Size",
    "UniformScalingFactor",
]
