"""Step timing for ``--verbose`` runs.

A service call owns one :class:`StepTimer`. Each ``step()`` block that runs
while the timer is enabled adds ``{"name", "duration_ms", ...}`` to a flat
list, which :meth:`StepTimer.attach` copies into ``ServiceResult.meta``.
"""

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog

from badchecks.services.result import ServiceResult

log = structlog.get_logger(__name__)


class StepTimer:
    """Collects wall-clock timings for the named steps of one call."""

    def __init__(self, *, enabled: bool) -> None:
        self.enabled = enabled
        self.steps: list[dict[str, Any]] = []

    @contextmanager
    def step(self, name: str) -> Iterator[dict[str, Any]]:
        """Time the block; annotations written to the yielded dict are kept.

        The step is recorded even if the block raises.
        """
        entry: dict[str, Any] = {"name": name}
        if not self.enabled:
            yield entry
            return
        started = time.perf_counter()
        try:
            yield entry
        finally:
            entry["duration_ms"] = round((time.perf_counter() - started) * 1000, 3)
            self.steps.append(entry)
            log.debug("step.timed", **entry)

    def attach(self, result: ServiceResult) -> ServiceResult:
        """Return *result* with ``meta["timings"]`` set, if enabled."""
        if not self.enabled:
            return result
        meta = {**(result.meta or {}), "timings": self.steps}
        return result.model_copy(update={"meta": meta})
