"""CheckService — run one check inside its own binding session.

Defaults for the message prefix, the identifier, and the integer
constraints come from :class:`~badchecks.config.settings.BadChecksSettings`;
explicit arguments override them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from badchecks.bind import BadCheck, bind_bad_checks
from badchecks.checks import (
    is_bad_boolean,
    is_bad_integer,
    is_bad_string,
    is_bad_string_array,
)
from badchecks.errors import BadArgumentError
from badchecks.services.result import ServiceError, ServiceResult
from badchecks.services.timing import StepTimer

if TYPE_CHECKING:
    from badchecks.config.settings import BadChecksSettings

logger = logging.getLogger(__name__)

CHECKS: dict[str, BadCheck] = {
    "boolean": is_bad_boolean,
    "string": is_bad_string,
    "integer": is_bad_integer,
    "string-array": is_bad_string_array,
}


class CheckService:
    """Validate single values on behalf of the CLI."""

    def __init__(self, settings: BadChecksSettings) -> None:
        self._settings = settings

    def check(
        self,
        kind: str,
        value: Any,
        *,
        msg_prefix: str | None = None,
        identifier: str | None = None,
        minimum: float | None = None,
        maximum: float | None = None,
        divisible_by: float | None = None,
    ) -> ServiceResult:
        """Check *value* with the check registered under *kind*.

        Returns ``ok=True`` if the value is valid. Otherwise ``ok=False``
        with error code ``INVALID`` (the explanation is the message), or
        ``BAD_ARGUMENT`` if the constraints themselves were unusable.
        ``data["check_msgs"]`` always holds the session's message list. With
        ``verbose`` settings, ``meta["timings"]`` lists the bind and check steps.
        """
        op = f"check_{kind.replace('-', '_')}"
        bad_check = CHECKS.get(kind)
        if bad_check is None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="UNKNOWN_KIND",
                    message=f"No check for kind '{kind}'",
                    detail={"kinds": sorted(CHECKS)},
                ),
            )

        defaults = self._settings.check
        prefix = defaults.msg_prefix if msg_prefix is None else msg_prefix
        args: list[Any] = [value, defaults.identifier if identifier is None else identifier]
        if kind == "integer":
            limits = self._settings.integer
            args += [
                limits.minimum if minimum is None else minimum,
                limits.maximum if maximum is None else maximum,
                limits.divisible_by if divisible_by is None else divisible_by,
            ]

        timer = StepTimer(enabled=self._settings.verbose)
        try:
            with timer.step("bind"):
                check_msgs, bound_check = bind_bad_checks(prefix, bad_check)
            with timer.step(kind) as step:
                explanation = bound_check(*args)
                step["valid"] = explanation is False
        except BadArgumentError as exc:
            logger.warning("Check %s was misused: %s", kind, exc)
            misuse = ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="BAD_ARGUMENT",
                    message=str(exc),
                    detail={"function": exc.function, "argument": exc.argument},
                ),
            )
            return timer.attach(misuse)

        data = {"kind": kind, "valid": explanation is False, "check_msgs": check_msgs}
        if explanation is False:
            return timer.attach(ServiceResult(ok=True, op=op, data=data))
        invalid = ServiceResult(
            ok=False,
            op=op,
            data=data,
            error=ServiceError(code="INVALID", message=explanation),
        )
        return timer.attach(invalid)
