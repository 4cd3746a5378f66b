"""Custom exceptions for the aspect-ratio package."""

from typing import Any


class AspectRatioError(Exception):
    """Base exception for all aspect-ratio errors."""

    pass


class ArithmeticFailure(AspectRatioError, ArithmeticError):
    """Raised when a checked arithmetic operation cannot produce a valid result."""

    def __init__(self, message: str, *operands: Any) -> None:
        super().__init__(message)
        self.operands = operands


class DivisionError(ArithmeticFailure):
    """Raised when a division has a zero divisor or a non-finite result."""

    pass


class MultiplicationError(ArithmeticFailure):
    """Raised when a multiplication overflows or yields a non-finite result."""

    pass


class CastError(ArithmeticFailure):
    """Raised when a value is not representable in the destination type."""

    def __init__(self, message: str, value: Any, target: Any) -> None:
        super().__init__(message, value)
        self.value = value
        self.target = target


class EmptySizeError(ArithmeticFailure):
    """Raised when scaling collapses a dimension to zero and empty sizes are disallowed."""

    pass


class ShapeError(AspectRatioError, ValueError):
    """Raised when an array shape does not describe a 2D image."""

    pass


class ConfigurationError(AspectRatioError):
    """Raised when configuration is invalid."""

    pass
