"""Shared helpers for the composed checks: argument faults and recording.

INVARIANT: every ``require_*`` helper runs before a check touches
``check_msgs``, so a fault never leaves a partial entry behind.
"""

from __future__ import annotations

import logging
from typing import Any, Literal, NoReturn

from badchecks.domain.exact import as_comparable, is_finite, is_nan
from badchecks.domain.kinds import ValueKind, classify
from badchecks.errors import BadArgumentError, BadArgumentValueError

logger = logging.getLogger(__name__)


def fault(
    function: str,
    argument: str,
    reason: str,
    *,
    error: type[BadArgumentError] = BadArgumentError,
) -> NoReturn:
    logger.debug("Fault in %s(): %s %s", function, argument, reason)
    raise error(function, argument, reason)


def kind_reason(value: Any, expected: ValueKind) -> str | None:
    """Explain why *value* is not of the *expected* kind, or None if it is."""
    kind = classify(value)
    if kind is expected:
        return None
    if kind is ValueKind.NULL:
        return f"is null not type '{expected}'"
    if kind is ValueKind.ARRAY:
        return f"is an array not type '{expected}'"
    return f"is type '{kind}' not type '{expected}'"


def require_string(function: str, argument: str, value: Any) -> None:
    """Fault unless *value* is a ``str``."""
    reason = kind_reason(value, ValueKind.STRING)
    if reason is not None:
        fault(function, argument, reason)


def require_check_msgs(function: str, check_msgs: Any) -> None:
    """Fault unless *check_msgs* is a ``list`` holding only strings."""
    if not isinstance(check_msgs, list):
        if check_msgs is None:
            fault(function, "check_msgs", "is null not an array")
        if isinstance(check_msgs, tuple):
            fault(function, "check_msgs", "is a tuple not an array")
        fault(function, "check_msgs", f"is type '{classify(check_msgs)}' not an array")
    for i, item in enumerate(check_msgs):
        reason = kind_reason(item, ValueKind.STRING)
        if reason is not None:
            fault(function, f"check_msgs[{i}]", reason)


def require_common(function: str, msg_prefix: Any, check_msgs: Any, identifier: Any) -> None:
    """Validate the arguments every composed check shares."""
    require_string(function, "msg_prefix", msg_prefix)
    require_check_msgs(function, check_msgs)
    require_string(function, "identifier", identifier)


def require_number(function: str, argument: str, value: Any) -> None:
    """Fault unless *value* is a real number (booleans excluded)."""
    kind = classify(value)
    if kind is ValueKind.NUMBER:
        return
    if kind is ValueKind.NULL:
        fault(function, argument, "is null not 'number'")
    if kind is ValueKind.ARRAY:
        fault(function, argument, "is an array not 'number'")
    fault(function, argument, f"is type '{kind}' not 'number'")


def require_divisor(function: str, argument: str, value: Any) -> None:
    """Fault unless *value* is a finite, non-zero real number."""
    require_number(function, argument, value)
    if not is_finite(value) or value == 0:
        fault(
            function,
            argument,
            f"is {value} not a non-zero finite number",
            error=BadArgumentValueError,
        )


def require_bound(function: str, argument: str, value: Any) -> None:
    """Fault unless *value* is a real number or an infinity (not NaN)."""
    require_number(function, argument, value)
    if is_nan(value):
        fault(
            function,
            argument,
            f"is {value} not a comparable number",
            error=BadArgumentValueError,
        )


def require_ordered(function: str, minimum: Any, maximum: Any) -> None:
    """Fault if *minimum* is greater than *maximum*."""
    if as_comparable(minimum) > as_comparable(maximum):
        fault(
            function,
            "minimum",
            f"{minimum} is greater than maximum {maximum}",
            error=BadArgumentValueError,
        )


def record(
    function: str, check_msgs: list[str], result: str | Literal[False]
) -> str | Literal[False]:
    """Append an explanation to the shared list and hand it back.

    ``False`` passes through untouched.
    """
    if result:
        check_msgs.append(result)
        logger.debug("%s() reported an invalid value", function)
    return result
