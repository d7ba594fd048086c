"""Exact arithmetic on any real number ``classify()`` calls a number.

``int``, ``Fraction``, ``Decimal`` and ``float`` mix freely here without
a lossy trip through ``float``: huge ints never overflow and decimal
NaNs (signalling ones included) are inspected rather than converted.
"""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from fractions import Fraction
from typing import Any


def is_finite(value: Any) -> bool:
    """Whether *value* is neither infinite nor NaN.

    Examples:
        >>> is_finite(10**400)
        True
        >>> is_finite(Decimal("sNaN"))
        False
    """
    if isinstance(value, numbers.Rational):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


def is_nan(value: Any) -> bool:
    """Whether *value* is NaN (quiet or signalling)."""
    if isinstance(value, numbers.Rational):
        return False
    if isinstance(value, Decimal):
        return value.is_nan()
    return math.isnan(value)


def as_exact(value: Any) -> Fraction:
    """Convert a finite number to a ``Fraction`` with no rounding."""
    if isinstance(value, (numbers.Rational, float, Decimal)):
        return Fraction(value)
    return Fraction(float(value))


def as_comparable(value: Any) -> Fraction | float:
    """A finite number as a ``Fraction``; an infinity as a ``float``.

    Both compare exactly against a ``Fraction``. NaN must be ruled out first.
    """
    if is_finite(value):
        return as_exact(value)
    return float(value)
