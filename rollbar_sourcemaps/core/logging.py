"""Structured logging via structlog.

Library modules log through stdlib `logging`; this module renders those
records through structlog so the console entry point gets either coloured
console output or JSON lines.

Renderer selection:
  debug=True  — `ConsoleRenderer` for local builds.
  debug=False — `JSONRenderer` for CI logs.

Nothing here runs at import time. Applications embedding the pipeline
keep whatever logging setup they already have.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(debug: bool = True) -> None:
    """Configure structlog and route stdlib logging through it.

    Calling multiple times is safe: the root handler is replaced, not
    stacked.
    """
    shared_processors: list = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if debug:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    # httpx logs every request at INFO; keep it out of build output.
    logging.getLogger("httpx").setLevel(logging.WARNING)
