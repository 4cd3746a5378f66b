"""Tests for scaling configuration."""

import pytest

from aspect_ratio.arithmetic import Ceil, Floor, RoundingMode
from aspect_ratio.core.config import ScalingConfig, ScalingConfigBuilder
from aspect_ratio.core.mode import ScalingMode
from aspect_ratio.exceptions import ConfigurationError


class TestScalingConfig:
    """Tests for ScalingConfig."""

    def test_defaults(self) -> None:
        """Test the default configuration."""
        config = ScalingConfig()
        assert config.mode is None
        assert config.rounding is RoundingMode.CEIL
        assert config.allow_empty is True
        assert isinstance(config.rounding_strategy, Ceil)

    def test_validation(self) -> None:
        """Test invalid values are rejected."""
        with pytest.raises(ConfigurationError):
            ScalingConfig(mode="fit")
        with pytest.raises(ConfigurationError):
            ScalingConfig(rounding="ceil")

    def test_from_env(self, monkeypatch) -> None:
        """Test reading configuration from the environment."""
        monkeypatch.setenv("ASPECT_RATIO_ROUNDING", "floor")
        monkeypatch.setenv("ASPECT_RATIO_DEFAULT_MODE", "Cover")

        config = ScalingConfig.from_env()

        assert config.rounding is RoundingMode.FLOOR
        assert config.mode is ScalingMode.COVER
        assert isinstance(config.rounding_strategy, Floor)

    def test_from_env_unset(self, monkeypatch) -> None:
        """Test unset variables keep the defaults."""
        monkeypatch.delenv("ASPECT_RATIO_ROUNDING", raising=False)
        monkeypatch.delenv("ASPECT_RATIO_DEFAULT_MODE", raising=False)
        assert ScalingConfig.from_env() == ScalingConfig()

    def test_from_env_mapping(self) -> None:
        """Test reading from an explicit mapping."""
        config = ScalingConfig.from_env({"ASPECT_RATIO_ROUNDING": "round"})
        assert config.rounding is RoundingMode.ROUND

    def test_from_env_invalid(self) -> None:
        """Test unknown names raise a configuration error."""
        with pytest.raises(ConfigurationError):
            ScalingConfig.from_env({"ASPECT_RATIO_ROUNDING": "sideways"})
        with pytest.raises(ConfigurationError):
            ScalingConfig.from_env({"ASPECT_RATIO_DEFAULT_MODE": "stretch"})


class TestScalingConfigBuilder:
    """Tests for ScalingConfigBuilder."""

    def test_builder_pattern(self) -> None:
        """Test building configuration with builder pattern."""
        config = (
            ScalingConfigBuilder()
            .with_mode(ScalingMode.FIT)
            .with_rounding(RoundingMode.TRUNC)
            .with_allow_empty(False)
            .build()
        )

        assert config == ScalingConfig(
            mode=ScalingMode.FIT, rounding=RoundingMode.TRUNC, allow_empty=False
        )

    def test_builder_defaults(self) -> None:
        """Test an untouched builder builds the default config."""
        assert ScalingConfigBuilder().build() == ScalingConfig()
