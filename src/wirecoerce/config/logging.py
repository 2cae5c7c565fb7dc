"""structlog configuration for wirecoerce.

Everything is written to stderr so decoded records on stdout stay
pipeable.  Engine pass-through records are plain stdlib log calls; the
formatter lifts their ``extra`` decode fields (``wire_path``,
``expected``) and the ``model`` bound by the decode service into the
event, so both renderers show where in the payload a value was kept.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "wirecoerce"

#: ``extra`` keys copied from stdlib records into structlog events.
DECODE_FIELDS = ("wire_path", "expected", "actual_type")


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(allow=DECODE_FIELDS),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging to one stderr handler.

    Args:
        verbose: DEBUG for the ``wirecoerce`` loggers (this is what makes
            lenient pass-throughs visible); WARNING otherwise.
        log_json: One JSON object per line instead of console lines.

    Safe to call repeatedly; the root handler is replaced, not stacked.
    Third-party loggers stay at WARNING.
    """
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
