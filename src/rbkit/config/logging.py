"""structlog configuration for rbkit.

Both structlog loggers and plain ``logging.getLogger(__name__)`` loggers in
rbkit render through one stderr handler, either as console lines or as JSON.
Only the ``rbkit`` hierarchy follows the configured level; every other logger
stays at WARNING.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable

import structlog

_SHARED_PROCESSORS: tuple[structlog.types.Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
)


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    levels = logging.getLevelNamesMapping()
    try:
        return levels[level.upper()]
    except KeyError:
        msg = f"Unknown log level {level!r}"
        raise ValueError(msg) from None


def _stderr_handler(log_json: bool) -> logging.Handler:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=list(_SHARED_PROCESSORS),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(
    *,
    level: str | int = logging.WARNING,
    log_json: bool = False,
    quiet_loggers: Iterable[str] = (),
) -> None:
    """Route all logging through structlog on stderr.

    Safe to call repeatedly: the root handler is replaced, never stacked.

    Args:
        level: Level name or number for the ``rbkit`` logger hierarchy.
        log_json: Emit JSON lines instead of console output.
        quiet_loggers: Loggers pinned to WARNING even if set lower elsewhere.

    Raises:
        ValueError: If *level* is not a known level name.
    """
    rbkit_level = _resolve_level(level)

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers = [_stderr_handler(log_json)]
    root.setLevel(logging.WARNING)

    logging.getLogger("rbkit").setLevel(rbkit_level)
    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)
