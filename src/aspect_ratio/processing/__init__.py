"""Processing helpers built on the scaling engine."""

from aspect_ratio.processing.scaler import ImageScaler

__all__ = ["ImageScaler"]
