import logging
import sys
from typing import Any, cast

import structlog

SHARED_PROCESSORS: list[structlog.typing.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
    structlog.processors.format_exc_info,
]


def configure_logging(level: str = "INFO", json_output: bool = True) -> None:
    """
    Configure structlog for the process.

    JSON lines carry the event under ``message``; the console renderer
    keeps structlog's default ``event`` key.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if json_output:
        renderers: list[structlog.typing.Processor] = [
            structlog.processors.EventRenamer("message"),
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderers = [structlog.dev.ConsoleRenderer(colors=False)]

    structlog.configure(
        processors=[*SHARED_PROCESSORS, *renderers],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)


def configure_from_settings() -> None:
    from .config import get_settings

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, json_output=settings.LOG_JSON)


def get_logger(
    name: str | None = None, **initial_context: Any
) -> structlog.stdlib.BoundLogger:
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return cast("structlog.stdlib.BoundLogger", logger)
