"""Tests for rounding strategies."""

import pytest

from aspect_ratio.arithmetic import (
    Ceil,
    Floor,
    Round,
    RoundingMode,
    RoundingPolicy,
    Trunc,
)
from aspect_ratio.exceptions import ConfigurationError


class TestStrategies:
    """Tests for individual strategies."""

    def test_ceil(self) -> None:
        """Test rounding toward positive infinity."""
        assert Ceil().round(99.01) == 100.0
        assert Ceil().round(100.0) == 100.0
        assert Ceil().round(-1.5) == -1.0

    def test_floor(self) -> None:
        """Test rounding toward negative infinity."""
        assert Floor().round(99.99) == 99.0
        assert Floor().round(-1.5) == -2.0

    def test_round_half_away_from_zero(self) -> None:
        """Test nearest rounding with halves away from zero."""
        assert Round().round(2.5) == 3.0
        assert Round().round(3.5) == 4.0
        assert Round().round(2.4) == 2.0
        assert Round().round(-2.5) == -3.0
        assert Round().round(0.49999999999999994) == 0.0
        assert Round().round(-0.49999999999999994) == 0.0
        assert Round().round(4503599627370495.5) == 4503599627370496.0

    def test_trunc(self) -> None:
        """Test rounding toward zero."""
        assert Trunc().round(2.9) == 2.0
        assert Trunc().round(-2.9) == -2.0


class TestRoundingPolicy:
    """Tests for RoundingPolicy."""

    @pytest.mark.parametrize(
        "mode,strategy",
        [
            (RoundingMode.CEIL, Ceil),
            (RoundingMode.FLOOR, Floor),
            (RoundingMode.ROUND, Round),
            (RoundingMode.TRUNC, Trunc),
        ],
    )
    def test_get(self, mode, strategy) -> None:
        """Test each mode resolves to its strategy."""
        assert isinstance(RoundingPolicy.get(mode), strategy)

    def test_parse(self) -> None:
        """Test parsing mode names."""
        assert RoundingPolicy.parse("Floor") is RoundingMode.FLOOR
        assert RoundingPolicy.parse(" ceil ") is RoundingMode.CEIL
        with pytest.raises(ConfigurationError):
            RoundingPolicy.parse("bankers")

    def test_register_strategy_replaces_builtin(self, monkeypatch) -> None:
        """Test a registered strategy takes the place of the built-in one for its mode."""

        class Zero:
            def round(self, value: float) -> float:
                return 0.0

        monkeypatch.setattr(RoundingPolicy, "_strategies", dict(RoundingPolicy._strategies))
        RoundingPolicy.register_strategy(RoundingMode.TRUNC, Zero)

        assert RoundingPolicy.get(RoundingMode.TRUNC).round(5.5) == 0.0
        assert isinstance(RoundingPolicy.get(RoundingMode.CEIL), Ceil)
