"""
Structured logging setup.

The library only ever calls ``structlog.get_logger``; applications that want
the default console pipeline call :func:`configure_logging` once at startup.
"""

import logging
import sys
from typing import Optional

import structlog

from .settings import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog on top of stdlib logging at the configured level"""
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.value)

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    logging.getLogger("secutil").setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.CallsiteParameterAdder(
                parameters=[structlog.processors.CallsiteParameter.FILENAME,
                            structlog.processors.CallsiteParameter.LINENO]
            ),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
