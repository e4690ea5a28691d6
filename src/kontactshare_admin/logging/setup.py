# ABOUTME: Structlog configuration for the admin client.
# ABOUTME: Renders console or JSON logs to stderr so command output stays clean.

import logging
import sys

import structlog

from kontactshare_admin.config import LogFormat, Settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog with the processors and format from settings.

    Args:
        settings: Settings instance, uses defaults if None.
    """
    if settings is None:
        settings = Settings()

    log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_format == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.extend([
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger, optionally bound to a logger name.

    Args:
        name: Optional logger name for context.

    Returns:
        Bound structlog logger.
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()
