"""The ``badchecks`` command: global flags, then one subcommand."""

from __future__ import annotations

import click

from badchecks import __version__
from badchecks.commands._context import AppContext
from badchecks.commands.check import check
from badchecks.config.settings import BadChecksSettings


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="badchecks")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print nothing for a valid value.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug events and time each step.")
@click.option("--log-json", is_flag=True, help="Write log records to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Read settings from this TOML file instead of badchecks.toml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """badchecks — validate values and explain what is wrong with them."""
    # Unset flags must not mask BADCHECKS_* env vars or the TOML file.
    chosen = {name: True for name, on in flags.items() if on}
    ctx.obj = AppContext(BadChecksSettings.from_cli(config_path=config_path, **chosen))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(check)
