"""
Structured logging setup.

Records cross process boundaries constantly, so decode failures are logged
as structured events that a log pipeline can filter on record type and field.
"""

import logging

import structlog

from care_records.config import LoggingConfig

SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def _configure_structlog(renderer: structlog.typing.Processor) -> None:
    structlog.configure(
        processors=[*SHARED_PROCESSORS, renderer],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(config: LoggingConfig) -> None:
    """Apply level and renderer from configuration. Call once at application startup."""
    logging.basicConfig(format="%(message)s", level=getattr(logging, config.level))
    logging.getLogger("care_records").setLevel(config.level)

    if config.format == "console":
        _configure_structlog(structlog.dev.ConsoleRenderer())
    else:
        _configure_structlog(structlog.processors.JSONRenderer())


# Configure structured logging (JSON until the application says otherwise)
_configure_structlog(structlog.processors.JSONRenderer())
