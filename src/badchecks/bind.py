"""Binding — share one message prefix and one message list across checks.

Typical usage::

    check_msgs, is_bad_str, is_bad_int = bind_bad_checks(
        "resize()", is_bad_string, is_bad_integer
    )
    is_bad_str(name, "name")
    is_bad_int(width, "width", 1, 4096)
    if check_msgs:
        raise ValueError("\\n".join(check_msgs))
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Literal

from badchecks.checks._helpers import fault
from badchecks.domain.kinds import ValueKind, classify

logger = logging.getLogger(__name__)

StringOrFalse = str | Literal[False]
"""Returned by every check: ``False`` if valid, otherwise an explanation."""

BadCheck = Callable[..., StringOrFalse]
"""A check before binding: ``(msg_prefix, check_msgs, *args) -> StringOrFalse``."""

BoundBadCheck = Callable[..., StringOrFalse]
"""A check after binding: ``(*args) -> StringOrFalse``."""


def bind_bad_check(msg_prefix: str, check_msgs: list[str], bad_check: BadCheck) -> BoundBadCheck:
    """Pre-load a single check with a prefix and a shared message list.

    Arguments are not validated here; :func:`bind_bad_checks` does that.
    """

    def bound(*args: Any, **kwargs: Any) -> StringOrFalse:
        return bad_check(msg_prefix, check_msgs, *args, **kwargs)

    bound.__name__ = getattr(bad_check, "__name__", "bound")
    return bound


def bind_bad_checks(msg_prefix: str, *bad_checks: BadCheck) -> tuple[Any, ...]:
    """Prepare checks for use.

    Args:
        msg_prefix: Added to the start of every explanation, typically the
            name of the function whose arguments are being checked.
        *bad_checks: Any number of checks to bind to *msg_prefix* and to a
            fresh message list.

    Returns:
        ``(check_msgs, *bound_checks)``: a new empty list, then one bound
        check per argument, in the order given.

    Raises:
        BadArgumentError: If *msg_prefix* is not a string, or any entry of
            *bad_checks* is not callable.
    """
    kind = classify(msg_prefix)
    if kind is ValueKind.NULL:
        fault("bind_bad_checks", "msg_prefix", "is null not 'string'")
    if kind is ValueKind.ARRAY:
        fault("bind_bad_checks", "msg_prefix", "is an array not 'string'")
    if kind is not ValueKind.STRING:
        fault("bind_bad_checks", "msg_prefix", f"is type '{kind}' not 'string'")
    for i, bad_check in enumerate(bad_checks):
        if not callable(bad_check):
            fault(
                "bind_bad_checks",
                f"bad_checks[{i}]",
                f"is type '{classify(bad_check)}' not 'function'",
            )

    check_msgs: list[str] = []
    logger.debug("Bound %d check(s) under prefix %r", len(bad_checks), msg_prefix)
    return (
        check_msgs,
        *(bind_bad_check(msg_prefix, check_msgs, bad_check) for bad_check in bad_checks),
    )
