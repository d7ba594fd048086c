"""AppContext — what the root group hands to every subcommand."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from badchecks.config.logging import configure_logging
from badchecks.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from badchecks.config.settings import BadChecksSettings
    from badchecks.services.result import ServiceResult


class AppContext:
    """Merged settings plus the one place results are printed.

    Building an AppContext configures logging, so every subcommand logs
    through the same handler.
    """

    def __init__(self, settings: BadChecksSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result*: stdout when ok, else stderr and exit status 1."""
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            click.get_current_context().exit(1)
        if text:
            click.echo(text)
