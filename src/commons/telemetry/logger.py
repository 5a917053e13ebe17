"""Structured diagnostic logging for the tool server.

Log records are written to stderr. Stdout belongs to the MCP transport and
must only ever carry protocol frames.
"""

import json
import logging
import sys
import uuid
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any, ClassVar, TextIO

# One correlation ID per tool invocation
correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)

# ContextVar has no default_factory; missing context is handled in get_log_context
log_context_var: ContextVar[dict[str, Any]] = ContextVar("log_context")

_RESERVED_RECORD_KEYS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)


def get_correlation_id() -> str | None:
    """Get the current correlation ID."""
    return correlation_id_var.get()


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set the correlation ID for the current context.

    Args:
        correlation_id: Optional correlation ID. Generated if not provided.

    Returns:
        The correlation ID that was set.
    """
    cid = correlation_id or str(uuid.uuid4())
    correlation_id_var.set(cid)
    return cid


def get_log_context() -> dict[str, Any]:
    """Get a copy of the current logging context."""
    try:
        return log_context_var.get().copy()
    except LookupError:
        return {}


def set_log_context(**kwargs: Any) -> None:
    """Add key-value pairs to the logging context."""
    ctx = get_log_context()
    ctx.update(kwargs)
    log_context_var.set(ctx)


def clear_log_context() -> None:
    """Clear the logging context."""
    log_context_var.set({})


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(
        self,
        *,
        include_timestamp: bool = True,
        include_level: bool = True,
        include_logger: bool = True,
        include_path: bool = False,
    ) -> None:
        """Initialize the JSON formatter.

        Args:
            include_timestamp: Include timestamp in output.
            include_level: Include log level in output.
            include_logger: Include logger name in output.
            include_path: Include file path and line number.
        """
        super().__init__()
        self.include_timestamp = include_timestamp
        self.include_level = include_level
        self.include_logger = include_logger
        self.include_path = include_path

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as a single JSON line."""
        log_data: dict[str, Any] = {}

        if self.include_timestamp:
            log_data["timestamp"] = datetime.now(UTC).isoformat()
        if self.include_level:
            log_data["level"] = record.levelname
        if self.include_logger:
            log_data["logger"] = record.name
        if self.include_path:
            log_data["path"] = f"{record.pathname}:{record.lineno}"

        cid = get_correlation_id()
        if cid:
            log_data["correlation_id"] = cid

        log_data["message"] = record.getMessage()

        context = get_log_context()
        if context:
            log_data["context"] = context

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Fields passed through `extra=`
        for key in set(record.__dict__) - _RESERVED_RECORD_KEYS:
            log_data[key] = getattr(record, key)

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable text formatter with color support."""

    COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET: ClassVar[str] = "\033[0m"

    def __init__(self, *, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as text, prefixed by tool and correlation ID."""
        timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S")
        if self.use_color:
            level = f"{self.COLORS.get(record.levelname, '')}{record.levelname:8}"
            level += self.RESET
        else:
            level = f"{record.levelname:8}"

        parts = [timestamp, level, f"[{record.name}]"]

        tool = get_log_context().get("tool")
        if tool:
            parts.append(f"<{tool}>")

        cid = get_correlation_id()
        if cid:
            parts.append(f"[{cid[:8]}]")

        parts.append(record.getMessage())
        message = " ".join(parts)

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


def configure_logging(
    level: str = "INFO",
    format_type: str = "json",
    logger_name: str | None = None,
    *,
    stream: TextIO | None = None,
    enabled: bool = True,
) -> logging.Logger:
    """Configure and return a logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        format_type: Output format ('json' or 'text').
        logger_name: Optional logger name. Defaults to root logger.
        stream: Destination stream. Defaults to stderr.
        enabled: When False the logger is silenced entirely.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)
    logger.handlers.clear()
    logger.propagate = False

    if not enabled:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL + 1)
        return logger

    log_level = getattr(logging, level.upper())
    logger.setLevel(log_level)

    target = stream if stream is not None else sys.stderr
    handler = logging.StreamHandler(target)
    handler.setLevel(log_level)

    if format_type == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(TextFormatter(use_color=target.isatty()))

    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger by name.

    Args:
        name: Logger name (usually __name__).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
