"""Structured logging configuration."""

import logging
import sys

import structlog

from core.config import Settings, settings as default_settings


def setup_logging(app_settings: Settings | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Console rendering in development, JSON lines in production. Safe to call
    more than once; the last call wins.
    """
    cfg = app_settings or default_settings
    level = logging.getLevelName(cfg.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    renderer: structlog.types.Processor
    if cfg.use_json_logs:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    # SQLAlchemy and friends still log through the stdlib. No-op if the
    # host already installed handlers.
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(level)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if cfg.debug else logging.WARNING
    )
