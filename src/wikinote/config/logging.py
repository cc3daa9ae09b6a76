"""Log routing for the wikinote CLI.

Library modules log with ``logging.getLogger(__name__)`` and never touch
handlers. The CLI calls :func:`configure_logging` once, which sends the
``wikinote`` namespace through structlog's formatter to stderr: console
lines by default, JSON lines with ``--log-json``. The root logger and
third-party loggers (markdown-it, ruamel) are left alone.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "wikinote"


def _renderers(log_json: bool) -> list[structlog.types.Processor]:
    if log_json:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> logging.Logger:
    """Attach one stderr handler to the ``wikinote`` logger and return it.

    ``verbose`` lowers the level from WARNING to DEBUG, which surfaces
    per-note parse counts and skipped files. Calling again replaces the
    handler.
    """
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *_renderers(log_json),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
