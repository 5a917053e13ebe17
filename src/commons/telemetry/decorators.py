"""Telemetry helpers for timing calls and scoping log context."""

import functools
import inspect
import logging
import time
from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar, overload

from src.commons.telemetry.logger import (
    correlation_id_var,
    get_log_context,
    get_logger,
    log_context_var,
    set_correlation_id,
)

P = ParamSpec("P")
R = TypeVar("R")


@overload
def timed(
    func: Callable[P, R],
) -> Callable[P, R]: ...


@overload
def timed(
    *,
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
    threshold_ms: float | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]: ...


def timed(
    func: Callable[P, R] | None = None,
    *,
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
    threshold_ms: float | None = None,
) -> Callable[P, R] | Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator to measure and log function execution time.

    Args:
        func: The function to decorate (when used without parentheses).
        logger: Optional logger instance.
        level: Log level for timing messages.
        threshold_ms: Only log if execution exceeds this threshold in milliseconds.

    Returns:
        Decorated function.
    """

    def decorator(fn: Callable[P, R]) -> Callable[P, R]:
        log = logger or get_logger(fn.__module__)

        def _report(start: float) -> None:
            elapsed_ms = (time.perf_counter() - start) * 1000
            if threshold_ms is None or elapsed_ms >= threshold_ms:
                log.log(
                    level,
                    f"{fn.__qualname__} completed",
                    extra={"duration_ms": round(elapsed_ms, 2)},
                )

        @functools.wraps(fn)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            start = time.perf_counter()
            try:
                return fn(*args, **kwargs)
            finally:
                _report(start)

        @functools.wraps(fn)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            start = time.perf_counter()
            try:
                result = await fn(*args, **kwargs)  # type: ignore[misc]
                return result  # type: ignore[no-any-return]
            finally:
                _report(start)

        if inspect.iscoroutinefunction(fn):
            return async_wrapper  # type: ignore[return-value]
        return sync_wrapper

    if func is not None:
        return decorator(func)
    return decorator


class LogContext:
    """Context manager scoping log context and, optionally, a correlation ID.

    Used around a single tool invocation so that every record emitted while
    handling it carries the tool name and a fresh correlation ID.
    """

    def __init__(self, *, new_correlation_id: bool = False, **kwargs: Any) -> None:
        """Initialize with context values.

        Args:
            new_correlation_id: Generate a correlation ID for the scope.
            **kwargs: Key-value pairs to add to logging context.
        """
        self.context = kwargs
        self.new_correlation_id = new_correlation_id
        self.correlation_id: str | None = None
        self._previous_context: dict[str, Any] = {}
        self._previous_correlation_id: str | None = None

    def __enter__(self) -> "LogContext":
        self._previous_context = get_log_context()
        log_context_var.set({**self._previous_context, **self.context})
        if self.new_correlation_id:
            self._previous_correlation_id = correlation_id_var.get()
            self.correlation_id = set_correlation_id()
        return self

    def __exit__(self, *args: Any) -> None:
        log_context_var.set(self._previous_context)
        if self.new_correlation_id:
            correlation_id_var.set(self._previous_correlation_id)
