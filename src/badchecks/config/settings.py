"""Settings for the command line, merged from four places.

Earlier sources win:

1. flags passed to :meth:`BadChecksSettings.from_cli`
2. ``BADCHECKS_*`` environment variables (``__`` reaches into a section,
   e.g. ``BADCHECKS_CHECK__MSG_PREFIX``)
3. ``badchecks.toml``, found by :func:`find_config` or named with ``--config``
4. the defaults in :mod:`badchecks.config.models`
"""

from __future__ import annotations

import os
import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from badchecks.config.models import CheckConfig, IntegerConfig

CONFIG_FILENAME = "badchecks.toml"
CONFIG_ENV_VAR = "BADCHECKS_CONFIG"

# Parsed TOML for the settings object being built by from_cli().
_file_values: ContextVar[dict[str, Any] | None] = ContextVar("_file_values", default=None)


def find_config(start: Path | None = None) -> Path | None:
    """Locate badchecks.toml, the way git locates .git/.

    ``BADCHECKS_CONFIG`` names the file outright (None if it does not
    exist). Otherwise search *start* (default: cwd) and each parent.
    """
    named = os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    return next(
        (d / CONFIG_FILENAME for d in (here, *here.parents) if (d / CONFIG_FILENAME).is_file()),
        None,
    )


def load_config(path: Path) -> dict[str, Any]:
    """Parse *path*; malformed TOML is a usage error, not a traceback."""
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


class BadChecksSettings(BaseSettings):
    """Everything the CLI reads, frozen once built.

    Attributes:
        config_path: The TOML file that was loaded, or None.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="BADCHECKS_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    check: CheckConfig = Field(default_factory=CheckConfig)
    integer: IntegerConfig = Field(default_factory=IntegerConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Flags, then environment, then the TOML file; no dotenv or secrets."""
        toml_source = InitSettingsSource(settings_cls, init_kwargs=_file_values.get() or {})
        return init_settings, env_settings, toml_source

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> BadChecksSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* that does not exist is ignored, as if no
        file had been found. *cwd* is where the walk-up search starts.
        """
        if config_path:
            path: Path | None = Path(config_path)
            if not path.is_file():
                path = None
        else:
            path = find_config(cwd)

        token = _file_values.set(load_config(path) if path else {})
        try:
            return cls(config_path=path, **cli_flags)
        finally:
            _file_values.reset(token)
