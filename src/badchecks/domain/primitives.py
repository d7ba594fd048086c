"""Primitive checks shared by the composed checks.

These helpers assume their arguments were already validated by the
caller, so they never raise. Each returns ``False`` when *value* is
valid, or an explanation string when it is not. None of them touch a
message list; appending is the composed checks' job.
"""

from __future__ import annotations

from typing import Any, Literal

from badchecks.domain.kinds import ValueKind, classify, is_array

DEFAULT_IDENTIFIER = "A value"


def describe(identifier: str) -> str:
    """Return what to call a value in an explanation."""
    return identifier or DEFAULT_IDENTIFIER


def is_bad_type(
    msg_prefix: str,
    value: Any,
    identifier: str,
    type_str: ValueKind | str,
) -> str | Literal[False]:
    """Validate *value* against an expected kind.

    ``None`` and arrays get their own wording, since "type 'null'" reads
    badly and arrays are the most common wrong-kind mistake::

        >>> is_bad_type("f()", None, "x", "boolean")
        "f(): x is null not type 'boolean'"
        >>> is_bad_type("f()", [1], "x", "boolean")
        "f(): x is an array not type 'boolean'"
        >>> is_bad_type("f()", 1, "", "boolean")
        "f(): A value is type 'number' not 'boolean'"
    """
    kind = classify(value)
    if kind == type_str:
        return False
    if kind is ValueKind.NULL:
        reason = "is null not type"
    elif kind is ValueKind.ARRAY:
        reason = "is an array not type"
    else:
        reason = f"is type '{kind}' not"
    return f"{msg_prefix}: {describe(identifier)} {reason} '{type_str}'"


def is_bad_array(msg_prefix: str, value: Any, identifier: str) -> str | Literal[False]:
    """Validate that *value* is a list or tuple."""
    if is_array(value):
        return False
    kind = classify(value)
    reason = "is null not" if kind is ValueKind.NULL else f"is type '{kind}' not"
    return f"{msg_prefix}: {describe(identifier)} {reason} an array"


def is_bad_null(msg_prefix: str, value: Any, identifier: str) -> str | Literal[False]:
    """Validate that *value* is exactly ``None``."""
    kind = classify(value)
    if kind is ValueKind.NULL:
        return False
    reason = "is an array not" if kind is ValueKind.ARRAY else f"is type '{kind}' not"
    return f"{msg_prefix}: {describe(identifier)} {reason} null"
