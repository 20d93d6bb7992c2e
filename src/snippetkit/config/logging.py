"""Logging setup for the snippetkit CLI.

Diagnostics from :class:`~snippetkit.diagnostics.LoggingSink` and debounce
tracing are stdlib ``logging`` records under the ``snippetkit`` logger.
This module gives them one stderr handler rendered by structlog: console
lines by default, JSON lines with ``--log-json``. Invalid arguments show
at WARNING; timings and debounce events need ``--verbose``.
"""

from __future__ import annotations

import logging
import sys

import structlog

KIT_LOGGER = "snippetkit"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route snippetkit diagnostics to stderr.

    Args:
        verbose: Lower the ``snippetkit`` logger to DEBUG so timing and
            debounce events are shown.
        log_json: Render one JSON object per line.
    """
    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(KIT_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    # Debounce timers run on asyncio; keep its own chatter at WARNING.
    logging.getLogger("asyncio").setLevel(logging.WARNING)
