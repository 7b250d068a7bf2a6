"""Structlog configuration for ghuser."""

import logging
import sys

import structlog

from ghuser.config import LookupConfig, LogFormat


def _stderr_logger_factory(*args) -> structlog.PrintLogger:
    # Resolved per call so redirected stderr streams are honoured.
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(config: LookupConfig | None = None) -> None:
    """
    Configure structlog with appropriate processors and output format.

    Log lines are written to stderr; stdout is reserved for the profile.

    Args:
        config: LookupConfig instance, uses defaults if None
    """
    if config is None:
        config = LookupConfig()

    log_level = getattr(logging, config.log_level.upper(), logging.WARNING)

    # Common processors
    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    # Add format-specific processors
    if config.log_format == LogFormat.JSON:
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
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a configured structlog logger.

    Args:
        name: Optional logger name for context

    Returns:
        Configured structlog BoundLogger
    """
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger_name=name)
    return logger
