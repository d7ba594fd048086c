"""Command: check a single value from the command line."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from badchecks.services.check import CHECKS, CheckService

if TYPE_CHECKING:
    from badchecks.commands._context import AppContext


class NumberParamType(click.ParamType):
    """An int when the text is integral, otherwise a float (``inf`` allowed)."""

    name = "number"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, (int, float)):
            return value
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            self.fail(f"{value!r} is not a number", param, ctx)


NUMBER = NumberParamType()


def _parse_json(ctx: click.Context, param: click.Parameter, value: str) -> Any:
    try:
        return json.loads(value)
    except json.JSONDecodeError as exc:
        msg = f"{value!r} is not valid JSON ({exc.msg}); quote strings, e.g. '\"text\"'"
        raise click.BadParameter(msg, ctx=ctx, param=param) from exc


EXAMPLES = """\
  badchecks check boolean true
  badchecks check string '"hello"' --identifier name
  badchecks check integer 7 --min 0 --max 10
  badchecks check integer --divisible-by 2 -- -4
  badchecks check string-array '["a", "b"]' --prefix 'load()'
  badchecks --json check integer 2.5"""


def _show_examples(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(EXAMPLES)
    ctx.exit(0)


@click.command()
@click.argument("kind", type=click.Choice(sorted(CHECKS)))
@click.argument("value", metavar="VALUE", callback=_parse_json)
@click.option("-p", "--prefix", "msg_prefix", default=None, help="Message prefix.")
@click.option("-i", "--identifier", default=None, help="What to call the value.")
@click.option("--min", "minimum", type=NUMBER, default=None, help="Integer minimum.")
@click.option("--max", "maximum", type=NUMBER, default=None, help="Integer maximum.")
@click.option("--divisible-by", type=NUMBER, default=None, help="Integer divisor.")
@click.option(
    "--examples",
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=_show_examples,
    help="Show usage examples and exit.",
)
@click.pass_obj
def check(
    app: AppContext,
    kind: str,
    value: Any,
    msg_prefix: str | None,
    identifier: str | None,
    minimum: float | None,
    maximum: float | None,
    divisible_by: float | None,
) -> None:
    """Check a JSON VALUE against KIND; exit 1 if it is invalid."""
    app.emit(
        CheckService(app.settings).check(
            kind,
            value,
            msg_prefix=msg_prefix,
            identifier=identifier,
            minimum=minimum,
            maximum=maximum,
            divisible_by=divisible_by,
        )
    )
