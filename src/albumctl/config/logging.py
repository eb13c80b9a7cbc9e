"""Log output for albumctl, built on structlog.

Module loggers (``logging.getLogger(__name__)``) and structlog loggers share
one processor chain and one stderr handler. While a service operation runs,
its name is bound as ``op``, so every line says which check produced it::

    2024-06-01T10:00:00Z [debug] Rejected album title: ''  op=check_title
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from structlog.types import Processor

PACKAGE_LOGGER = "albumctl"


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Send all log output to stderr, as JSON lines when *log_json* is set.

    The ``albumctl`` logger passes DEBUG records (rejected values, telemetry
    spans) when *verbose*, WARNING and above otherwise. Third-party loggers
    stay at WARNING. Calling again replaces the handler instead of adding one.
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
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)


@contextmanager
def bound_operation(op: str) -> Iterator[None]:
    """Tag log lines emitted inside the block with ``op=<op>``.

    A nested block rebinds ``op``; the outer name is restored on exit.
    """
    with structlog.contextvars.bound_contextvars(op=op):
        yield
