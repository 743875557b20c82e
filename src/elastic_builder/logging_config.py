import os
import sys
from typing import TextIO

import structlog

DEFAULT_SERVICE_NAME = "elastic-builder"


def _console_renderer(logger, log_method, event_dict):
    """Render as: timestamp file:line event key=value ..."""
    timestamp = event_dict.pop("timestamp", "")
    filename = event_dict.pop("filename", "")
    lineno = event_dict.pop("lineno", "")
    level = event_dict.pop("level", "")

    if filename and lineno:
        location = f"{filename}:{lineno}"
    else:
        location = filename or "unknown"

    message_parts = [level.upper()] if level else []
    event = event_dict.pop("event", "")
    if event:
        message_parts.append(event)

    for key, value in event_dict.items():
        if key not in ("service", "func_name"):
            message_parts.append(f"{key}={value}")

    message = " ".join(message_parts)
    return f"{timestamp} {location} {message}".strip()


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
    include_timestamps: bool = True,
    service_name: str = DEFAULT_SERVICE_NAME,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog for the library and the command line tool."""

    level = getattr(
        structlog.stdlib.logging, log_level.upper(), structlog.stdlib.logging.INFO
    )

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]

    if include_timestamps:
        shared_processors.append(structlog.processors.TimeStamper(fmt="iso"))

    shared_processors.append(
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        )
    )

    if json_logs or os.getenv("LOG_FORMAT", "").lower() == "json":
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = _console_renderer

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(stream or sys.stderr),
        cache_logger_on_first_use=False,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(service=service_name)


def get_logger(name: str = None) -> structlog.BoundLogger:
    """Get a configured logger instance."""
    if name:
        return structlog.get_logger(name)
    return structlog.get_logger()


def configure_from_env(
    log_level: str | None = None,
    json_logs: bool = False,
    default_level: str = "INFO",
) -> None:
    """Configure logging from LOG_LEVEL, LOG_FORMAT and SERVICE_NAME.

    Explicit arguments win over the environment.
    """
    configure_logging(
        log_level=log_level or os.getenv("LOG_LEVEL", default_level),
        json_logs=json_logs or os.getenv("LOG_FORMAT", "").lower() == "json",
        service_name=os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME),
    )
