"""Faults raised when a check or the binder itself is misused.

A fault is a programmer error, not a validation result: it is raised
immediately and never recorded in a message list.
"""

from __future__ import annotations


class BadArgumentError(TypeError):
    """An argument passed to a check or to the binder has the wrong kind.

    Attributes:
        function: Name of the function that was misused, e.g. ``"is_bad_string"``.
        argument: The offending argument, e.g. ``"check_msgs[2]"``.
        reason: What is wrong with it, e.g. ``"is null not type 'string'"``.
    """

    def __init__(self, function: str, argument: str, reason: str) -> None:
        self.function = function
        self.argument = argument
        self.reason = reason
        super().__init__(f"{function}(): {argument} {reason}")


class BadArgumentValueError(BadArgumentError, ValueError):
    """An argument has the right kind but a value the check cannot use."""
