"""structlog configuration for marsrover.

Logs always go to stderr so the single report line on stdout stays
machine-readable. Two renderers:
- Human (default): console renderer, colored when stderr is a TTY
- JSON (--log-json): one JSON object per line

Mission context (planet/rover references) is bound with
:func:`bind_mission_context` and merged into every record via
``structlog.contextvars``.
"""

from __future__ import annotations

import logging
import sys

import structlog

ROVER_LOGGER = "marsrover"

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
    """Route structlog and stdlib records through one stderr handler.

    Args:
        verbose: DEBUG for ``marsrover.*`` loggers; otherwise WARNING+.
        log_json: Use the JSON renderer instead of the console renderer.

    Safe to call repeatedly: the root handler is replaced, not stacked,
    and previously bound mission context is cleared.
    """
    structlog.contextvars.clear_contextvars()
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

    logging.getLogger(ROVER_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)


def bind_mission_context(planet_ref: str, rover_ref: str) -> None:
    """Attach the mission's source references to every later log record."""
    structlog.contextvars.bind_contextvars(planet=planet_ref, rover=rover_ref)
