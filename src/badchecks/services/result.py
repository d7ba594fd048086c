"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: All service-layer methods return ServiceResult. A fault raised by
a check is converted into an ``error`` here; it never escapes a service.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``code`` is ``"INVALID"`` when a checked value failed validation and
    ``"BAD_ARGUMENT"`` when the check itself was misused.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded (for checks: the value was valid).
        op: Name of the operation (e.g. ``"check_integer"``).
        data: Operation-specific payload.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing spans in verbose mode).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
