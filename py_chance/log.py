"""structlog setup for applications embedding py_chance."""

import logging
from typing import Optional

import structlog

from .config import Settings, settings as default_settings


def configure_logging(config: Optional[Settings] = None) -> None:
    """Configure structlog on top of stdlib logging."""
    config = config or default_settings

    logging.basicConfig(format="%(message)s", level=config.log_level.upper())
    logging.getLogger().setLevel(config.log_level.upper())

    renderer = structlog.processors.JSONRenderer() if config.log_json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
