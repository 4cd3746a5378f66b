"""Tests for the image array adapter."""

import numpy as np
import pytest

from aspect_ratio import Bounds, DivisionError, EmptySizeError, ShapeError, Size
from aspect_ratio.arithmetic import RoundingMode
from aspect_ratio.core.config import ScalingConfigBuilder
from aspect_ratio.processing.scaler import ImageScaler


class TestImageScaler:
    """Tests for ImageScaler."""

    def test_size_of(self) -> None:
        """Test reading the size of an image array."""
        image = np.zeros((1080, 1920, 3), dtype=np.float32)
        assert ImageScaler.size_of(image) == Size(1920, 1080)

        gray = np.zeros((20, 10), dtype=np.uint8)
        assert ImageScaler.size_of(gray) == Size(10, 20)

    def test_target_size(self) -> None:
        """Test computing a target size for an image."""
        image = np.zeros((1080, 1920, 3), dtype=np.float32)
        assert ImageScaler.target_size(image, Bounds.contain().w(960)) == Size(960, 540)
        assert ImageScaler.target_size(image, Bounds.new()) == Size(1920, 1080)

    def test_target_size_rounding(self) -> None:
        """Test a rounding mode can be passed through."""
        image = np.zeros((101, 300), dtype=np.uint8)
        bounds = Bounds.contain().w(150)
        assert ImageScaler.target_size(image, bounds) == Size(150, 51)
        assert ImageScaler.target_size(image, bounds, rounding=RoundingMode.FLOOR) == Size(150, 50)

    def test_target_shape_keeps_channels(self) -> None:
        """Test the output shape keeps trailing axes."""
        image = np.zeros((400, 200, 4), dtype=np.float32)
        assert ImageScaler.target_shape(image, Bounds.contain().h(200)) == (200, 100, 4)

        gray = np.zeros((400, 200), dtype=np.uint8)
        assert ImageScaler.target_shape(gray, Bounds.exact().w(30).h(10)) == (10, 30)

    def test_target_shape_config(self) -> None:
        """Test engine settings are applied."""
        image = np.zeros((1, 1000), dtype=np.uint8)
        config = (
            ScalingConfigBuilder()
            .with_rounding(RoundingMode.FLOOR)
            .with_allow_empty(False)
            .build()
        )
        with pytest.raises(EmptySizeError):
            ImageScaler.target_shape(image, Bounds.fit().w(10), config)

    def test_empty_image(self) -> None:
        """Test an empty image cannot be scaled to a bound."""
        image = np.zeros((0, 100, 3), dtype=np.float32)
        with pytest.raises(DivisionError):
            ImageScaler.target_size(image, Bounds.contain().h(10))

    def test_one_dimensional_array(self) -> None:
        """Test a 1D array is not an image."""
        with pytest.raises(ShapeError):
            ImageScaler.size_of(np.zeros(10))
