"""
Logging Setup

Configures structlog on top of the standard library logger so Flask,
SQLAlchemy and application events share one output stream.
"""

import logging
import sys

import structlog


def configure_logging(level='INFO', json_logs=False):
    """Configure structlog and the root logger level.

    Safe to call again, e.g. for each app created in tests: the root level
    and renderer always follow the latest call.
    """
    logging.basicConfig(format='%(message)s', stream=sys.stdout)
    logging.getLogger().setLevel(level)

    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
