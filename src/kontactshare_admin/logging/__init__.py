# ABOUTME: Logging package for structured log output.
# ABOUTME: Exports configure_logging and get_logger backed by structlog.

from kontactshare_admin.logging.setup import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
