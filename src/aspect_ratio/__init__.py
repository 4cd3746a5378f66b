"""Aspect-ratio preserving size computation with checked arithmetic."""

from aspect_ratio.core.bounds import Bounds
from aspect_ratio.core.config import ScalingConfig, ScalingConfigBuilder
from aspect_ratio.core.factor import (
    NonUniformScalingFactor,
    ScalingFactor,
    UniformScalingFactor,
)
from aspect_ratio.core.mode import ScalingMode
from aspect_ratio.core.size import Size
from aspect_ratio.exceptions import (
    ArithmeticFailure,
    AspectRatioError,
    CastError,
    ConfigurationError,
    DivisionError,
    EmptySizeError,
    MultiplicationError,
    ShapeError,
)

__version__ = "0.3.0"

__all__ = [
    "ArithmeticFailure",
    "AspectRatioError",
    "Bounds",
    "CastError",
    "ConfigurationError",
    "DivisionError",
    "EmptySizeError",
    "MultiplicationError",
    "NonUniformScalingFactor",
    "ScalingConfig",
    "ScalingConfigBuilder",
    "ScalingFactor",
    "ScalingMode",
    "ShapeError",
    "Size",
    "UniformScalingFactor",
]
