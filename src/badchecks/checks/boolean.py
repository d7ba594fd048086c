"""Boolean check."""

from __future__ import annotations

from typing import Any, Literal

from badchecks.checks._helpers import record, require_common
from badchecks.domain.kinds import ValueKind
from badchecks.domain.primitives import is_bad_type


def is_bad_boolean(
    msg_prefix: str,
    check_msgs: list[str],
    value: Any,
    identifier: str = "",
) -> str | Literal[False]:
    """Validate a boolean.

    Args:
        msg_prefix: Added to the start of every explanation, typically a
            function name.
        check_msgs: Stores an explanation for each invalid value found.
            May be shared with other bound checks.
        value: The value to check.
        identifier: What to call *value* in the explanation.

    Returns:
        ``False`` if *value* is a ``bool``, otherwise the explanation,
        which has also been appended to *check_msgs*.

    Raises:
        BadArgumentError: If any argument other than *value* is misused.
    """
    require_common("is_bad_boolean", msg_prefix, check_msgs, identifier)
    result = is_bad_type(msg_prefix, value, identifier, ValueKind.BOOLEAN)
    return record("is_bad_boolean", check_msgs, result)
