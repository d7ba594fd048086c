"""Integer check with range and divisibility constraints."""

from __future__ import annotations

import math
from typing import Any, Literal

from badchecks.checks._helpers import (
    record,
    require_bound,
    require_common,
    require_divisor,
    require_ordered,
)
from badchecks.domain.exact import as_comparable, as_exact, is_finite
from badchecks.domain.kinds import ValueKind
from badchecks.domain.primitives import describe, is_bad_type


def _violation(value: Any, minimum: Any, maximum: Any, divisible_by: Any) -> str | None:
    """Name the first integer rule a number breaks, or None."""
    if not is_finite(value):
        return "is not finite"
    exact = as_exact(value)
    if exact.denominator != 1:
        return "is not an integer"
    if exact < as_comparable(minimum):
        return f"is below the minimum {minimum}"
    if exact > as_comparable(maximum):
        return f"is above the maximum {maximum}"
    if exact % as_exact(divisible_by) != 0:
        return f"is not divisible by {divisible_by}"
    return None


def is_bad_integer(
    msg_prefix: str,
    check_msgs: list[str],
    value: Any,
    identifier: str = "",
    minimum: float = -math.inf,
    maximum: float = math.inf,
    divisible_by: float = 1,
) -> str | Literal[False]:
    """Validate an integer.

    Any real number with no fractional part counts, so ``7`` and ``7.0``
    are both valid. Booleans are not numbers here. ``Decimal`` and
    ``Fraction`` values and ints of any size are compared exactly.

    Args:
        msg_prefix: Added to the start of every explanation, typically a
            function name.
        check_msgs: Stores an explanation for each invalid value found.
            May be shared with other bound checks.
        value: The value to check.
        identifier: What to call *value* in the explanation.
        minimum: The smallest allowed value (inclusive).
        maximum: The largest allowed value (inclusive).
        divisible_by: *value* must divide by this with no remainder.

    Returns:
        ``False`` if *value* is valid, otherwise an explanation naming the
        first rule that failed (kind, finiteness, integrality, minimum,
        maximum, divisibility). The explanation is also appended to
        *check_msgs*.

    Raises:
        BadArgumentError: If any argument other than *value* is misused.
        BadArgumentValueError: If *divisible_by* is zero or not finite, a
            bound is NaN, or *minimum* is greater than *maximum*.
    """
    fn = "is_bad_integer"
    require_common(fn, msg_prefix, check_msgs, identifier)
    require_bound(fn, "minimum", minimum)
    require_bound(fn, "maximum", maximum)
    require_divisor(fn, "divisible_by", divisible_by)
    require_ordered(fn, minimum, maximum)

    result = is_bad_type(msg_prefix, value, identifier, ValueKind.NUMBER)
    if not result:
        reason = _violation(value, minimum, maximum, divisible_by)
        if reason is not None:
            result = f"{msg_prefix}: {describe(identifier)} is {value} which {reason}"
    return record(fn, check_msgs, result)
