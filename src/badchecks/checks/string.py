"""String check."""

from __future__ import annotations

from typing import Any, Literal

from badchecks.checks._helpers import record, require_common
from badchecks.domain.kinds import ValueKind
from badchecks.domain.primitives import is_bad_type


def is_bad_string(
    msg_prefix: str,
    check_msgs: list[str],
    value: Any,
    identifier: str = "",
) -> str | Literal[False]:
    """Validate a string.

    Same contract as :func:`~badchecks.checks.boolean.is_bad_boolean`,
    expecting a ``str``. The empty string is valid.
    """
    require_common("is_bad_string", msg_prefix, check_msgs, identifier)
    result = is_bad_type(msg_prefix, value, identifier, ValueKind.STRING)
    return record("is_bad_string", check_msgs, result)
