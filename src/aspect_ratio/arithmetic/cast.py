"""Checked numeric casts between Python numbers and fixed-width numpy types."""

import math
import numbers
from typing import Union

import numpy as np
from numpy.typing import DTypeLike

from aspect_ratio.exceptions import CastError

Number = Union[numbers.Real, np.integer, np.floating]


def _describe(dtype: np.dtype) -> str:
    return dtype.name


def _cast_to_integer(value: Number, dtype: np.dtype) -> int:
    info = np.iinfo(dtype)
    if isinstance(value, (float, np.floating)) and not math.isfinite(value):
        raise CastError(
            f"Cannot cast non-finite value {value!r} to {_describe(dtype)}", value, dtype
        )
    integral = int(value)
    if integral != value:
        raise CastError(
            f"Cannot cast fractional value {value!r} to {_describe(dtype)}", value, dtype
        )
    if integral < info.min or integral > info.max:
        raise CastError(
            f"Value {value!r} out of range [{info.min}, {info.max}] for {_describe(dtype)}",
            value,
            dtype,
        )
    return integral


def _cast_to_float(value: Number, dtype: np.dtype) -> float:
    info = np.finfo(dtype)
    if isinstance(value, (float, np.floating)) and not math.isfinite(value):
        raise CastError(
            f"Cannot cast non-finite value {value!r} to {_describe(dtype)}", value, dtype
        )
    # int/float comparison is exact, float(value) is not
    if value > float(info.max) or value < float(info.min):
        raise CastError(
            f"Value {value!r} out of range for {_describe(dtype)}", value, dtype
        )
    return float(dtype.type(value))


def checked_cast(value: Number, dtype: DTypeLike) -> Union[int, float]:
    """Cast a number into the range of a fixed-width numpy type.

    Integral targets return a Python ``int``, floating targets a Python ``float``.

    Args:
        value: Number to convert
        dtype: Destination type (e.g. ``np.uint32``, ``np.float64``)

    Returns:
        The converted value

    Raises:
        CastError: If the value is not a number, is not finite, is fractional
            for an integral target, or lies outside the destination's range
    """
    target = np.dtype(dtype)
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise CastError(
            f"Cannot cast {type(value).__name__} to {_describe(target)}", value, target
        )
    if target.kind in "ui":
        return _cast_to_integer(value, target)
    if target.kind == "f":
        return _cast_to_float(value, target)
    raise CastError(f"Unsupported cast target {_describe(target)}", value, target)
