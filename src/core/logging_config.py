"""
Structured logging setup shared by the API server and the client.

JSON output in production (machine-readable for log aggregation), console
output in development. The stdlib ``logging`` level is aligned with the
configured level so repository and service loggers follow the same setting.
"""

import logging

import structlog

from src.config import settings


def configure_logging(log_level: str | None = None, log_format: str | None = None) -> None:
    level_name = (log_level or settings.log_level).upper()
    renderer_name = log_format or settings.log_format

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", level=getattr(logging, level_name))

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),  # ISO 8601 timestamps
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer() if renderer_name == "json"
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level_name)),
    )
