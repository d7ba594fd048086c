"""Render a ServiceResult as one human line or as JSON.

Human output goes through a Rich console writing into a ``StringIO``, so the
caller gets plain text back and decides where to print it. Rich leaves out
colour codes when the buffer is not a terminal, which keeps test output plain.
``--quiet`` prints nothing for a valid value; scripts read the exit status.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

if TYPE_CHECKING:
    from badchecks.services.result import ServiceResult

RESULT_THEME = Theme(
    {
        "result.ok": "bold green",
        "result.invalid": "bold yellow",
        "result.error": "bold red",
        "result.op": "cyan",
        "result.meta": "dim",
    }
)


class OutputSettings(BaseModel):
    """How a result should be rendered."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    no_color: bool = False


def _headline(result: ServiceResult) -> str:
    if result.ok:
        return f"[result.ok]OK[/]: [result.op]{result.op}[/]"
    error = result.error
    if error is not None and error.code == "INVALID":
        # The explanation already names the check, the value and the rule.
        return f"[result.invalid]INVALID[/]: {escape(error.message)}"
    message = error.message if error is not None else "Unknown error"
    return f"[result.error]ERROR[/]: [result.op]{result.op}[/] - {escape(message)}"


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet and result.ok:
        return ""

    buffer = StringIO()
    console = Console(
        file=buffer,
        theme=RESULT_THEME,
        no_color=settings.no_color,
        highlight=False,
        width=120,
    )
    console.print(_headline(result), soft_wrap=True)
    if settings.verbose and result.meta:
        for key, value in result.meta.items():
            console.print(f"  [result.meta]{key}[/]: {escape(str(value))}", soft_wrap=True)
    return buffer.getvalue().rstrip("\n")
