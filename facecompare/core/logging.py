"""Logging configuration for the face comparison app."""
import logging
import sys
from typing import List

import structlog
from structlog.stdlib import ProcessorFormatter

from facecompare.core.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure structured logging for the application.

    - Uses ConsoleRenderer with colors for development.
    - Uses JSONRenderer for other environments (staging, production).
    - Integrates with standard Python logging handlers.

    Args:
        settings: Settings providing ENVIRONMENT and LOG_LEVEL
    """
    shared_processors: List[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,  # Recommended for stdlib integration
        structlog.processors.TimeStamper(fmt="iso", utc=True),  # Use UTC timestamps
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,  # Required for stdlib formatter
    ]

    # Determine the final renderer based on environment
    if settings.ENVIRONMENT == "development":
        final_processor = structlog.dev.ConsoleRenderer(colors=True)
    else:
        # Production/Staging JSON logs
        final_processor = structlog.processors.JSONRenderer()
        # Add exception formatting for JSON logs
        shared_processors.insert(-1, structlog.processors.format_exc_info)

    # Configure structlog to work with standard logging
    structlog.configure(
        processors=shared_processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Configure the stdlib root logger
    formatter = ProcessorFormatter(processor=final_processor)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    # Streamlit reruns the script on every interaction, so replace handlers
    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(handler)
    # Set log level from settings (convert string like "INFO" to logging constant)
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    root_logger.setLevel(log_level)

    # Configure log levels for dependencies
    logging.getLogger("boto3").setLevel(logging.WARNING)
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("aiobotocore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    # Log confirmation
    root_logger.info(
        f"Logging setup complete. Environment: {settings.ENVIRONMENT}, Level: {settings.LOG_LEVEL}"
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance compatible with standard logging.

    Args:
        name: Name for the logger, typically __name__

    Returns:
        structlog.stdlib.BoundLogger: Configured logger instance
    """
    return structlog.get_logger(name)
