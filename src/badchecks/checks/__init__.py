"""Composed checks — validate their own arguments, then a value.

Each check takes ``(msg_prefix, check_msgs, value, identifier, ...)``,
returns ``False`` or an explanation, and appends the explanation to
``check_msgs`` when the value is invalid.
"""

from badchecks.checks.boolean import is_bad_boolean
from badchecks.checks.integer import is_bad_integer
from badchecks.checks.string import is_bad_string
from badchecks.checks.string_array import is_bad_string_array

__all__ = [
    "is_bad_boolean",
    "is_bad_integer",
    "is_bad_string",
    "is_bad_string_array",
]
