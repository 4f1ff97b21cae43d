"""
Structured logging configuration for commitvault.

Provides JSON-formatted logs with trace_id support for correlating the
operations issued by one caller identity.

Environment Variables:
    COMMITVAULT_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    COMMITVAULT_LOG_FORMAT: Log format (json, text) - default: json

Usage:
    from commitvault.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="alice")
    logger.info("Registering commitment", extra={"operation": "register"})
"""

import logging
import sys
from typing import Optional, TextIO

from pythonjsonlogger.json import JsonFormatter

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

FORMATS = ("json", "text")


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Ensures all logs have a trace_id field, even if not set via LoggerAdapter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True


class TraceLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that merges call-site extra into the adapter's extra."""

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs


def build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    return logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def setup_logging(
    level: str = "INFO",
    log_format: str = "json",
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure root logger with structured logging.

    Logs go to stderr by default so command output on stdout stays clean.
    Unknown levels fall back to INFO; unknown formats fall back to text.
    """
    lvl = LEVELS.get(level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(lvl)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(lvl)
    handler.setFormatter(build_formatter(log_format.lower()))
    handler.addFilter(TraceIDFilter())
    root_logger.addHandler(handler)


def get_logger(name: str, trace_id: Optional[str] = None) -> TraceLoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Trace ID for correlating logs (typically the caller identity)

    Example:
        logger = get_logger(__name__, trace_id="alice")
        logger.info("Deadline set")
        # Output (JSON): {"timestamp": "...", "level": "INFO", "message": "Deadline set", "trace_id": "alice"}
    """
    logger = logging.getLogger(name)
    return TraceLoggerAdapter(logger, {"trace_id": trace_id or "N/A"})
