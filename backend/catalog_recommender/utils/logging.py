"""Structured logging configuration"""

import logging
import sys
from typing import Optional

import structlog
from pythonjsonlogger import jsonlogger

SERVICE_NAME = "catalog-recommender"

_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.StackInfoRenderer(),
    structlog.dev.set_exc_info,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.JSONRenderer()
]


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure structlog and the stdlib root logger for JSON output

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    level = getattr(logging, log_level.upper())

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    structlog.configure(
        processors=_PROCESSORS,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False
    )
    structlog.contextvars.bind_contextvars(service=SERVICE_NAME)


def get_logger(name: str, **initial_values) -> structlog.BoundLogger:
    """
    Get a structured logger instance

    Args:
        name: Logger name (typically __name__)
        initial_values: Key-value pairs bound to every event from this logger

    Returns:
        Structured logger instance
    """
    return structlog.get_logger(name, **initial_values)


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter for stdlib loggers (uvicorn), matching structlog's fields"""

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)

        log_record['service'] = SERVICE_NAME
        log_record['level'] = record.levelname.lower()
        log_record['logger_name'] = record.name

        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)


def configure_uvicorn_logging(log_level: Optional[str] = None) -> None:
    """Route uvicorn's access and error logs through the JSON formatter"""

    formatter = CustomJsonFormatter('%(timestamp)s %(name)s %(message)s', timestamp=True)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    for name in ("uvicorn.access", "uvicorn.error"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = [handler]
        if log_level:
            uvicorn_logger.setLevel(log_level.upper())
