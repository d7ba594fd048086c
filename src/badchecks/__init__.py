"""bad-checks — runtime argument validation with human-readable explanations."""

from badchecks.bind import (
    BadCheck,
    BoundBadCheck,
    StringOrFalse,
    bind_bad_checks,
)
from badchecks.checks import (
    is_bad_boolean,
    is_bad_integer,
    is_bad_string,
    is_bad_string_array,
)
from badchecks.domain.kinds import ValueKind, classify
from badchecks.errors import BadArgumentError, BadArgumentValueError

__version__ = "0.1.0"

__all__ = [
    "BadArgumentError",
    "BadArgumentValueError",
    "BadCheck",
    "BoundBadCheck",
    "StringOrFalse",
    "ValueKind",
    "bind_bad_checks",
    "classify",
    "is_bad_boolean",
    "is_bad_integer",
    "is_bad_string",
    "is_bad_string_array",
    "__version__",
]
