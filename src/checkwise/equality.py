"""Value equality and order-independent sequence matching."""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import Any

import numpy as np

from checkwise.numeric import Comparison, numeric_compare, unwrap

_PLAIN_SCALARS = (np.str_, np.bytes_, np.bool_)


def deep_equal(a: Any, b: Any) -> bool:
    """Structural equality by value, with exact type matching at every level."""
    return _deep_equal(a, b, set())


def _deep_equal(a: Any, b: Any, visiting: set[tuple[int, int]]) -> bool:
    if type(a) is not type(b):
        return False

    if isinstance(a, np.ndarray):
        return a.shape == b.shape and a.dtype == b.dtype and bool(np.array_equal(a, b))

    is_record = is_dataclass(a) and not isinstance(a, type)
    if not (isinstance(a, (list, tuple, dict)) or is_record):
        return bool(a == b)

    # A pair already being compared further up the stack is cyclic; treat it as equal.
    key = (id(a), id(b))
    if key in visiting:
        return True
    visiting.add(key)
    try:
        if isinstance(a, dict):
            if a.keys() != b.keys():
                return False
            return all(_deep_equal(a[k], b[k], visiting) for k in a)
        if is_record:
            return all(
                _deep_equal(getattr(a, f.name), getattr(b, f.name), visiting)
                for f in fields(a)
            )
        if len(a) != len(b):
            return False
        return all(_deep_equal(x, y, visiting) for x, y in zip(a, b))
    finally:
        visiting.discard(key)


def values_equal(a: Any, b: Any) -> bool:
    """Return True if *a* and *b* are equal.

    Numeric equality wins over type equality, so ``np.int8(1)`` equals
    ``np.int64(1)`` and ``1`` equals ``1.0``. Values that are not numerically
    comparable are unwrapped if possible and otherwise compared with
    :func:`deep_equal`.
    """
    outcome = numeric_compare(a, b)
    if outcome is not Comparison.NOT_COMPARABLE:
        return outcome is Comparison.EQUAL

    unwrapped_a, ok_a = unwrap(a)
    unwrapped_b, ok_b = unwrap(b)
    if ok_a or ok_b:
        return values_equal(unwrapped_a, unwrapped_b)

    return deep_equal(a, b)


def as_sequence(v: Any) -> list[Any] | None:
    """Return the elements of an ordered sequence, or None if *v* is not one.

    Lists, tuples and one-dimensional NumPy arrays qualify. Strings and bytes
    do not. String, bytes and bool elements of an array come back as Python
    objects so they compare equal to plain values; numeric elements keep
    their NumPy width.
    """
    if isinstance(v, (list, tuple)):
        return list(v)
    if isinstance(v, np.ndarray) and v.ndim == 1:
        return [x.item() if isinstance(x, _PLAIN_SCALARS) else x for x in v]
    return None


def slice_contains(haystack: Any, needle: Any, exact_size: bool = False) -> bool:
    """Return True if every element of *needle* matches a distinct element of *haystack*.

    Matching ignores order and is one-to-one: duplicates in *needle* need as
    many equal elements in *haystack*. Each needle element claims the first
    unclaimed haystack element it equals. With *exact_size* both sequences
    must also have the same length.
    """
    hay = as_sequence(haystack)
    wanted = as_sequence(needle)
    if hay is None or wanted is None:
        return False

    if exact_size and len(hay) != len(wanted):
        return False
    if not wanted:
        return True
    if not hay:
        return False
    if len(hay) < len(wanted):
        return False

    claimed = [False] * len(hay)
    for element in wanted:
        for i, candidate in enumerate(hay):
            if claimed[i]:
                continue
            if values_equal(element, candidate):
                claimed[i] = True
                break
        else:
            return False
    return True
