"""Numeric projection and cross-width numeric comparison."""

from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Integer kinds narrower than this never get a float view.
_MIN_FLOAT_PROJECTION_BITS = 16


class Comparison(Enum):
    """Outcome of comparing *got* against *expected* numerically."""

    EQUAL = 0
    GREATER = 1
    LESS = -1
    NOT_COMPARABLE = -2


def _integer_width(v: Any) -> int | None:
    """Return the bit width of an integer-kinded value, or None if it is not one.

    Builtin ``int`` is treated as a 64-bit signed integer. Booleans are not
    numbers here, even though ``bool`` subclasses ``int``.
    """
    if isinstance(v, (bool, np.bool_)):
        return None
    if isinstance(v, np.integer):
        return v.dtype.itemsize * 8
    if isinstance(v, int):
        return 64
    return None


def as_integer(v: Any) -> int | None:
    """Project *v* onto a signed 64-bit integer.

    Succeeds for all signed integer kinds and for unsigned kinds whose value
    fits in int64. Returns None otherwise, including for floats.
    """
    if _integer_width(v) is None:
        return None
    value = int(v)
    if INT64_MIN <= value <= INT64_MAX:
        return value
    return None


def as_float(v: Any) -> float | None:
    """Project *v* onto a 64-bit float.

    Succeeds for float32/float64 and for integer kinds at least 16 bits wide.
    ``int8`` and ``uint8`` are deliberately left out, as are integers outside
    the int64 range.
    """
    if isinstance(v, (np.float32, np.float64)):
        return float(v)
    if isinstance(v, float):
        return v
    width = _integer_width(v)
    if width is None or width < _MIN_FLOAT_PROJECTION_BITS:
        return None
    value = as_integer(v)
    if value is None:
        return None
    return float(value)


def unwrap(v: Any) -> tuple[Any, bool]:
    """Unwrap a value held by a reflective container.

    A zero-dimensional NumPy array holds exactly one scalar; that scalar is
    returned with True. Anything else is returned unchanged with False.
    """
    if isinstance(v, np.ndarray) and v.ndim == 0:
        return v[()], True
    return v, False


def _order(expected: int | float, got: int | float) -> Comparison:
    if got == expected:
        return Comparison.EQUAL
    if got > expected:
        return Comparison.GREATER
    return Comparison.LESS


def numeric_compare(expected: Any, got: Any) -> Comparison:
    """Compare two values by numeric value, regardless of width or signedness.

    An integer equals a float when converting the integer to float makes them
    equal. Values without a usable projection give ``NOT_COMPARABLE``.
    """
    expected_int = as_integer(expected)
    if expected_int is not None:
        got_int = as_integer(got)
        if got_int is not None:
            return _order(expected_int, got_int)
        got_float = as_float(got)
        if got_float is not None:
            return _order(float(expected_int), got_float)
        return Comparison.NOT_COMPARABLE

    expected_float = as_float(expected)
    if expected_float is not None:
        got_float = as_float(got)
        if got_float is not None:
            return _order(expected_float, got_float)

    return Comparison.NOT_COMPARABLE
