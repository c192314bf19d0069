"""Structured logging setup for convert-headers.

Generated code is written to stdout, so every log record goes to stderr.
"""

import logging
import sys
from typing import Any

import structlog


_SHARED_PROCESSORS: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]


class _StderrHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler bound to whatever ``sys.stderr`` is at emit time."""

    @property  # type: ignore[override]
    def stream(self) -> Any:
        return sys.stderr

    @stream.setter
    def stream(self, value: Any) -> None:
        pass


def _select_renderer(json_logs: bool, log_format: str) -> Any:
    if json_logs or log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "plain":
        return structlog.dev.ConsoleRenderer(colors=False)
    if log_format == "rich":
        return structlog.dev.ConsoleRenderer(colors=True)
    # auto: colors only when a terminal is attached
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def setup_logging(
    json_logs: bool = False,
    log_level_name: str = "WARNING",
    log_format: str = "auto",
) -> structlog.stdlib.BoundLogger:
    """Configure structlog and the stdlib root logger.

    Args:
        json_logs: Render records as JSON lines instead of console output
        log_level_name: Minimum level name (DEBUG, INFO, WARNING, ...)
        log_format: One of ``auto``, ``rich``, ``plain`` or ``json``

    Returns:
        Logger bound to the ``convert_headers`` namespace
    """
    level = getattr(logging, log_level_name.upper(), logging.WARNING)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _select_renderer(json_logs, log_format),
        ],
    )

    handler = _StderrHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)

    return get_logger("convert_headers")


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance with the given name."""
    return structlog.get_logger(name)  # type: ignore[no-any-return]
