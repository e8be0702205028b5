"""Route tzconv's log events to stderr through structlog.

stdout carries conversion results, so every log line goes to stderr,
whether it comes from a structlog logger (the conversion handler) or a
plain ``logging`` one (the form and the zone adapter). Lines are rendered
for the console, or as JSON objects with ``--log-json``.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.stdlib import ProcessorFormatter


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """(Re)install the single stderr handler.

    ``tzconv.*`` loggers emit DEBUG with *verbose* and WARNING otherwise;
    everything else stays at WARNING.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    renderer: structlog.types.Processor
    if log_json:
        pre_chain.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger("tzconv").setLevel(logging.DEBUG if verbose else logging.WARNING)
