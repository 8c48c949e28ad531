"""
Structured Logging (structlog).

Every line carries the service name and deployment environment, plus the
request_id bound by the API middleware. The catalog API and the seeder
share this setup so their output can be joined in one log stream.
"""

import logging
import sys

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from netbox_config.settings import Settings

# Per-request lines already come from RequestLoggingMiddleware
QUIET_LOGGERS = ("uvicorn.access",)


def service_context(settings: Settings) -> Processor:
    """Build a processor stamping ``service`` and ``environment`` on each event.

    Values bound explicitly on a logger win over the settings.
    """
    service = settings.OTEL_SERVICE_NAME
    environment = settings.ENVIRONMENT

    def add_service_context(
        logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("service", service)
        event_dict.setdefault("environment", environment)
        return event_dict

    return add_service_context


def build_processors(settings: Settings) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        service_context(settings),
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def setup_logging(settings: Settings) -> None:
    """
    Configure structlog and the stdlib loggers it writes through.

    Output format: JSON (default) or text (dev)
    """
    level = settings.LOG_LEVEL.upper()
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    # SQL statements only at INFO when DB_ECHO is on
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DB_ECHO else logging.WARNING
    )

    structlog.configure(
        processors=build_processors(settings),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get configured logger."""
    return structlog.get_logger(name)
