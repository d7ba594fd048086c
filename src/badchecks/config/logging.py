"""structlog configuration for badchecks.

The library only logs through stdlib ``logging`` and never installs
handlers itself. The CLI calls :func:`configure_logging` once per run so
those records, and the service layer's structlog events, share one
formatter on stderr:

- Human (default): key=value console lines, coloured on a TTY
- JSON (--log-json): one object per line
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

LOGGER_NAME = "badchecks"

# Applied to structlog events and to plain stdlib records alike.
_PRE_CHAIN: tuple[structlog.types.Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
)


def _stderr_handler(stream: TextIO, *, log_json: bool) -> logging.Handler:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=list(_PRE_CHAIN),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Send ``badchecks.*`` records to *stream* through structlog.

    Calling it again replaces the root handler instead of adding another.

    Args:
        verbose: Let DEBUG records from ``badchecks.*`` through; otherwise
            WARNING and above. Other libraries stay at WARNING either way.
        log_json: Render JSON lines instead of console lines.
        stream: Defaults to ``sys.stderr`` as it is at call time.
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers[:] = [_stderr_handler(stream or sys.stderr, log_json=log_json)]
    root.setLevel(logging.WARNING)
    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
