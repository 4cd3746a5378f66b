"""Output dimensions for image arrays."""

import logging
from typing import Optional

import numpy as np

from aspect_ratio.core.bounds import Bounds
from aspect_ratio.core.config import ScalingConfig
from aspect_ratio.core.size import Rounding, Size

logger = logging.getLogger(__name__)


class ImageScaler:
    """Utility class computing target sizes for numpy images.

    Only dimensions are computed; resampling is left to the caller's image library.
    """

    @staticmethod
    def size_of(image: np.ndarray) -> Size:
        """Get the size of an image array (H, W[, C])."""
        return Size.from_shape(image.shape)

    @staticmethod
    def target_size(
        image: np.ndarray,
        bounds: Bounds,
        rounding: Rounding = None,
    ) -> Size:
        """Compute the size an image should be resized to.

        Args:
            image: Input image array (H, W, C)
            bounds: Target constraints
            rounding: Rounding strategy or mode (default: ceil)

        Returns:
            Target size
        """
        return ImageScaler.size_of(image).scale(bounds, rounding=rounding)

    @staticmethod
    def target_shape(
        image: np.ndarray,
        bounds: Bounds,
        config: Optional[ScalingConfig] = None,
    ) -> tuple[int, ...]:
        """Compute the output array shape for an image.

        Trailing axes (e.g. channels) are kept.

        Args:
            image: Input image array (H, W, C)
            bounds: Target constraints
            config: Engine settings (default: ceil rounding, empty sizes allowed)

        Returns:
            Output shape ``(height, width, *rest)``
        """
        source = ImageScaler.size_of(image)
        target = source.scale_with(bounds, config)
        if target != source:
            logger.debug("Image %s resizes to %s", source, target)
        return (target.height, target.width) + tuple(image.shape[2:])
