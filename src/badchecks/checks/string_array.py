"""String-array check."""

from __future__ import annotations

from typing import Any, Literal

from badchecks.checks._helpers import record, require_common
from badchecks.domain.kinds import ValueKind
from badchecks.domain.primitives import describe, is_bad_array, is_bad_type


def is_bad_string_array(
    msg_prefix: str,
    check_msgs: list[str],
    value: Any,
    identifier: str = "",
) -> str | Literal[False]:
    """Validate a list (or tuple) whose items are all strings.

    Only the first offending item is reported, named by its index::

        >>> is_bad_string_array("f()", [], ["a", None], "names")
        "f(): names[1] is null not type 'string'"

    An empty array is valid.
    """
    require_common("is_bad_string_array", msg_prefix, check_msgs, identifier)
    result = is_bad_array(msg_prefix, value, identifier)
    if not result:
        name = describe(identifier)
        for i, item in enumerate(value):
            result = is_bad_type(msg_prefix, item, f"{name}[{i}]", ValueKind.STRING)
            if result:
                break
    return record("is_bad_string_array", check_msgs, result)
