import contextvars
import logging
import sys
from typing import Optional

import structlog
from pythonjsonlogger.json import JsonFormatter
from structlog.stdlib import LoggerFactory

# Context variables for correlation and trace IDs
_correlation_id_var = contextvars.ContextVar("correlation_id", default=None)
_trace_id_var = contextvars.ContextVar("trace_id", default=None)


def setup_logging(
    level: str = "INFO",
    format_type: str = "json",  # "json" or "console"
    service_name: str = "sws-sdk",
) -> None:
    """
    Set up structured logging for applications using the SDK

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format_type: "json" for production, "console" for development
        service_name: Name added to every log entry
    """

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        add_service_context(service_name),
        add_correlation_context(),
    ]

    if format_type == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    # JSON output for non-structlog loggers
    if format_type == "json":
        root_logger = logging.getLogger()
        handler = logging.StreamHandler(sys.stdout)
        formatter = JsonFormatter(
            fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
        handler.setFormatter(formatter)
        root_logger.handlers = [handler]


def add_service_context(service_name: str):
    """Add service context to log entries that do not name a service"""

    def processor(logger, method_name, event_dict):
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def add_correlation_context():
    """Add correlation and trace IDs from context"""

    def processor(logger, method_name, event_dict):
        correlation_id = get_correlation_id()
        if correlation_id:
            event_dict["correlation_id"] = correlation_id

        trace_id = get_trace_id()
        if trace_id:
            event_dict["trace_id"] = trace_id

        return event_dict

    return processor


def set_correlation_id(correlation_id: Optional[str]) -> None:
    """Set correlation ID in context"""
    _correlation_id_var.set(correlation_id)


def set_trace_id(trace_id: Optional[str]) -> None:
    """Set trace ID in context"""
    _trace_id_var.set(trace_id)


def get_correlation_id() -> Optional[str]:
    """Get correlation ID from context"""
    return _correlation_id_var.get()


def get_trace_id() -> Optional[str]:
    """Get trace ID from context"""
    return _trace_id_var.get()


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """Get a structured logger instance"""
    return structlog.get_logger(name)
