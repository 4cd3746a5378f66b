"""Checked arithmetic: division, multiplication, casts and rounding."""

from aspect_ratio.arithmetic.cast import checked_cast
from aspect_ratio.arithmetic.ops import checked_div, checked_mul
from aspect_ratio.arithmetic.rounding import (
    DEFAULT_ROUNDING,
    Ceil,
    Floor,
    Round,
    RoundingMode,
    RoundingPolicy,
    RoundingStrategy,
    Trunc,
)

__all__ = [
    "checked_cast",
    "checked_div",
    "checked_mul",
    "Ceil",
    "DEFAULT_ROUNDING",
    "Floor",
    "Round",
    "RoundingMode",
    "RoundingPolicy",
    "RoundingStrategy",
    "Trunc",
]
