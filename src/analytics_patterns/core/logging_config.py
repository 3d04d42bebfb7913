"""
Centralized logging configuration.

Configure once at the application entry point, not per module.
"""

import logging
import sys

import structlog

from analytics_patterns.core.config_loader import load_logging_config


def configure_logging(level: int | str | None = None) -> None:
    """
    Configure stdlib logging and route structlog through it.

    Truly idempotent: safe to call multiple times without side effects.
    Checks if root logger already has handlers before configuring.

    Args:
        level: Root level override. None uses config/logging.yaml (or LOG_LEVEL).
    """
    root_logger = logging.getLogger()

    # Only configure if no handlers exist (truly idempotent)
    if root_logger.handlers:
        return

    config = load_logging_config()
    root_level = level if level is not None else config["root_level"]

    logging.basicConfig(
        level=root_level,
        format=config["format"],
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for logger_name, logger_level in config["module_levels"].items():
        logging.getLogger(logger_name).setLevel(logger_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
