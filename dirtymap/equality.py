"""
Shallow Equality
================

The comparison TrackedMap uses to decide whether a write changed a value.

Values are split into two classes:

- **Scalars** (``None``, numbers, strings, bytes, numpy scalar types) compare
  by ordinary value equality, so writing ``1`` over ``1`` is not a change.
- **Composites** (everything else: lists, dicts, tuples, sets, numpy arrays,
  arbitrary objects) compare by identity only. Writing an equal-but-distinct
  list over a list IS a change; mutating a stored list in place and writing
  the same object back is NOT.

Contents are never inspected recursively.

Example:
    >>> shallow_equal(1, 1.0)
    True
    >>> shallow_equal([1, 2], [1, 2])
    False
    >>> items = [1, 2]
    >>> shallow_equal(items, items)
    True
"""

from decimal import Decimal
from fractions import Fraction
from typing import Any

import numpy as np

SCALAR_TYPES = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    Decimal,
    Fraction,
    np.generic,
)


def is_scalar(value: Any) -> bool:
    """Return True if ``value`` compares by value rather than identity."""
    return isinstance(value, SCALAR_TYPES)


def shallow_equal(old: Any, new: Any) -> bool:
    """
    Compare two present values without looking inside them.

    Identical objects are always equal. Two scalars are equal when ``==``
    says so (numpy booleans are coerced). Any other pair is unequal, as is
    a pair whose comparison raises.
    """
    if old is new:
        return True
    if not (is_scalar(old) and is_scalar(new)):
        return False
    try:
        return bool(old == new)
    except (ValueError, TypeError):
        return False
