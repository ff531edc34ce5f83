"""Structured logging for the error boundary.

structlog renders through the stdlib root handler: one JSON line per entry
on stdout (or a coloured console line with LOG_CONSOLE=true). Fields bound
by RequestIDMiddleware are merged into every entry.
"""

import logging
import logging.config
import sys
from datetime import UTC, datetime
from typing import Any

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from structlog.stdlib import BoundLogger
from structlog.typing import EventDict, Processor


class LoggingSettings(BaseSettings):
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_console: bool = Field(default=False, alias="LOG_CONSOLE")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


def _utc_timestamp(_logger: object, _method_name: str, event_dict: EventDict) -> EventDict:
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


def _pre_chain() -> list[Processor]:
    """Processors shared by structlog loggers and plain stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _utc_timestamp,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        # Tracebacks of system-caused failures end up in the "exception" key
        structlog.processors.format_exc_info,
    ]


def _renderer(settings: LoggingSettings) -> Processor:
    if settings.log_console:
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def configure_logging(settings: LoggingSettings) -> None:
    """Route structlog through the stdlib root logger. Call once at startup."""
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler_config: dict[str, Any] = {
        "class": "logging.StreamHandler",
        "formatter": "structured",
        "stream": sys.stdout,
    }
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structured": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processor": _renderer(settings),
                    "foreign_pre_chain": pre_chain,
                },
            },
            "handlers": {"stdout": handler_config},
            "root": {"handlers": ["stdout"], "level": settings.log_level},
        }
    )


configure_logging(LoggingSettings())


def get_logger(name: str) -> BoundLogger:
    """Return a structlog logger named after the calling module.

    Example:
        logger.warning("validation_failed", code="B001", field="account")
        # {"event": "validation_failed", "code": "B001", "level": "warning", ...}
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
