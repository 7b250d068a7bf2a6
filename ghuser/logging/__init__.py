"""Structured logging for ghuser."""

from ghuser.logging.setup import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
