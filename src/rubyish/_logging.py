"""Structured logging for rubyish.

Every module logs through `get_logger(__name__)`, a structlog logger wrapped
around the stdlib logger of the same name, so all events live under the
`rubyish` logger namespace. The namespace carries a NullHandler: the library
is silent until `configure_logging()` (or `rubyish.init(log_level=...)`)
attaches a handler to it. Root logging and any global structlog
configuration are left to the application.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

__all__ = [
    'LOGGER_NAME',
    'configure_logging',
    'get_logger',
    'reset_logging',
]

LOGGER_NAME = 'rubyish'

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

# Handler installed by configure_logging(); replaced on every call
_handler: logging.Handler | None = None


def _event_processors() -> list[Any]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _renderer(json_output: bool, stream: IO[str]) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Send rubyish events at `level` and above to `stream` (stderr by default).

    Only the `rubyish` logger is touched: its previous handler from this
    function is replaced, its level is set and it stops propagating to the
    root logger.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", ...).
        json_output: One JSON object per line if True, console rendering otherwise.
        stream: Text stream to write to.

    Returns:
        The installed handler.
    """
    global _handler  # noqa: PLW0603

    target = sys.stderr if stream is None else stream
    handler = logging.StreamHandler(target)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_output, target),
            ],
        )
    )

    reset_logging()
    namespace = logging.getLogger(LOGGER_NAME)
    namespace.addHandler(handler)
    namespace.setLevel(getattr(logging, level.upper(), logging.INFO))
    namespace.propagate = False
    _handler = handler
    return handler


def reset_logging() -> None:
    """Detach the handler configure_logging() installed and restore defaults."""
    global _handler  # noqa: PLW0603

    namespace = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        namespace.removeHandler(_handler)
        _handler = None
    namespace.setLevel(logging.NOTSET)
    namespace.propagate = True


def get_logger(name: str = LOGGER_NAME) -> Any:
    """Structlog logger over the stdlib logger `name` (normally a `rubyish.*` module name).

    Events below the effective level of the stdlib logger are dropped before
    any processing.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_event_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
