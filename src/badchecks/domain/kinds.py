"""Value kinds — the closed classification every check dispatches on.

``classify()`` is the only place that inspects Python types. Everything
else compares :class:`ValueKind` members, so the wording of explanations
stays stable no matter which concrete type a caller passes in.
"""

from __future__ import annotations

import numbers
from decimal import Decimal
from enum import Enum, StrEnum
from typing import Any


class ValueKind(StrEnum):
    """Runtime kinds a checked value can have."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    FUNCTION = "function"
    OBJECT = "object"
    ARRAY = "array"
    SYMBOL = "symbol"


def classify(value: Any) -> ValueKind:
    """Return the kind of *value*.

    Order matters: ``bool`` is a subclass of ``int`` and ``StrEnum``
    members are strings, so the narrower kinds are tested first.
    ``Decimal`` is not registered as ``numbers.Real`` but counts as a number.

    Examples:
        >>> classify(None)
        <ValueKind.NULL: 'null'>
        >>> classify(True)
        <ValueKind.BOOLEAN: 'boolean'>
        >>> classify(2.5)
        <ValueKind.NUMBER: 'number'>
        >>> classify([1, 2])
        <ValueKind.ARRAY: 'array'>
        >>> classify({})
        <ValueKind.OBJECT: 'object'>
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (numbers.Real, Decimal)):
        return ValueKind.NUMBER
    if isinstance(value, Enum):
        return ValueKind.SYMBOL
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if callable(value):
        return ValueKind.FUNCTION
    return ValueKind.OBJECT


def is_array(value: Any) -> bool:
    """Whether *value* is an integer-indexed sequence (``list`` or ``tuple``)."""
    return classify(value) is ValueKind.ARRAY
