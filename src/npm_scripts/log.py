"""Rendering of npm_scripts debug records via structlog.

The runner never logs errors; it raises them. What it does emit, all at
DEBUG through stdlib loggers under ``npm_scripts``, is a trace of each
operation: which package.json was loaded and how many scripts it declared,
the package manager command line and working directory, and the exit status
and captured output sizes of each launch.

A program embedding the runner calls :func:`configure_logging` once to see
that trace on stderr, either as console lines or as JSON objects (one per
line) for log collectors.
"""

from __future__ import annotations

import logging
import sys

import structlog


LOGGER_NAME = "npm_scripts"


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Send npm_scripts records to stderr through structlog.

    Args:
        verbose: Show the DEBUG trace of descriptor loads and package manager
            launches. When False the ``npm_scripts`` logger stays at WARNING,
            which silences the library entirely.
        log_json: Emit JSON objects with ``event``, ``level``, ``logger`` and
            ``timestamp`` keys instead of console lines.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    # Library records come from plain stdlib loggers, so they enter through
    # the foreign chain.
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
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

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
