"""Logging setup for applications embedding bigradix.

The library wraps stdlib loggers and never configures logging on import, so
its debug events stay silent until the host application opts in.
"""

import logging
import sys

import structlog


def configure_logging(level: str = "INFO", json: bool = True) -> structlog.stdlib.BoundLogger:
    """Configure stdlib logging and structlog, return a bound logger."""
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
    )

    return structlog.stdlib.get_logger("bigradix")
