"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, badchecks.toml only contains
overrides. These settings drive the command line; the check functions
themselves take everything as arguments and never read configuration.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, field_validator, model_validator

from badchecks.domain.exact import as_comparable, is_finite, is_nan


class CheckConfig(BaseModel):
    """[check] section."""

    model_config = {"frozen": True}

    msg_prefix: str = "badchecks"
    identifier: str = "value"


class IntegerConfig(BaseModel):
    """[integer] section — default constraints for ``check integer``.

    Held to the same rules ``is_bad_integer`` applies to its arguments, so a
    config file cannot supply constraints the check would reject.
    """

    model_config = {"frozen": True}

    minimum: int | float = -math.inf
    maximum: int | float = math.inf
    divisible_by: int | float = 1

    @field_validator("minimum", "maximum")
    @classmethod
    def _bound_is_comparable(cls, value: int | float) -> int | float:
        if is_nan(value):
            msg = f"{value} is not a comparable number"
            raise ValueError(msg)
        return value

    @field_validator("divisible_by")
    @classmethod
    def _divisor_is_usable(cls, value: int | float) -> int | float:
        if not is_finite(value) or value == 0:
            msg = f"{value} is not a non-zero finite number"
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def _range_is_ordered(self) -> IntegerConfig:
        if as_comparable(self.minimum) > as_comparable(self.maximum):
            msg = f"minimum {self.minimum} is greater than maximum {self.maximum}"
            raise ValueError(msg)
        return self
