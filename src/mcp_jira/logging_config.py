"""Contextual logging configuration for MCP Jira."""

import logging
import os
import sys
import threading
import time
import types
import uuid
from collections.abc import Callable, Mapping
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, TypeVar, cast

T = TypeVar("T")

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIRECTORY = "logs"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5

# Shared by every ContextualLogger so that a tenant or trace id set while
# handling a request shows up in the lines of all components.
_context_data = threading.local()


def _current_context_str() -> str:
    context_data = getattr(_context_data, "data", {})
    if not context_data:
        return "no-context"

    # operation=X,trace_id=Y,...
    return ",".join(f"{k}={v}" for k, v in context_data.items())


class ContextFilter(logging.Filter):
    """Fills in ``context`` for records emitted by plain ``logging.Logger`` children."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = _current_context_str()
        return True


class ContextualLogger(logging.Logger):
    """Logger that stamps each record with the current operation context."""

    def _get_context_str(self) -> str:
        return _current_context_str()

    def _log(
        self,
        level: int,
        msg: object,
        args: tuple[object, ...] | Mapping[str, object],
        exc_info: Any = None,
        extra: Mapping[str, object] | None = None,
        stack_info: bool = False,
        stacklevel: int = 1,
    ) -> None:
        if extra is None:
            extra = {}

        if "context" not in extra:
            extra = dict(extra)
            extra["context"] = self._get_context_str()

        super()._log(level, msg, args, exc_info, extra, stack_info, stacklevel + 1)

    def set_context(self, **kwargs: Any) -> None:
        """
        Sets context values for the current thread.

        Args:
            **kwargs: Key-value pairs to add to the context
        """
        if not hasattr(_context_data, "data"):
            _context_data.data = {}
        _context_data.data.update(kwargs)

    def get_context(self) -> dict[str, Any]:
        """Returns a copy of the current thread's context."""
        return dict(getattr(_context_data, "data", {}))

    def clear_context(self) -> None:
        """Removes all context data for the current thread."""
        _context_data.data = {}

    def with_context(
        self, **context: Any
    ) -> Callable[[Callable[..., T]], Callable[..., T]]:
        """
        Returns a decorator that executes a function with specific context.

        Args:
            **context: Context values to be set during execution

        Returns:
            Decorator that applies the context
        """

        def decorator(func: Callable[..., T]) -> Callable[..., T]:
            @wraps(func)
            def wrapper(*args: Any, **kwargs: Any) -> T:
                old_context = self.get_context()
                self.set_context(**context)
                if "trace_id" not in _context_data.data:
                    self.set_context(trace_id=str(uuid.uuid4())[:8])
                try:
                    return func(*args, **kwargs)
                finally:
                    _context_data.data = old_context

            return wrapper

        return decorator


class LoggingContextManager:
    """Context manager that logs the start, failure and duration of an operation."""

    def __init__(
        self, logger: logging.Logger, operation: str, **context: Any
    ) -> None:
        """
        Initializes the logging context manager.

        Args:
            logger: Contextual logger
            operation: Name of the operation being executed
            **context: Additional context data
        """
        self.logger = logger
        self.operation = operation
        self.context = context.copy()
        self.start_time = time.time()
        self.trace_id = context.get("trace_id", str(uuid.uuid4())[:8])

    def __enter__(self) -> "LoggingContextManager":
        self.old_context = dict(getattr(_context_data, "data", {}))

        self.context["operation"] = self.operation
        self.context["trace_id"] = self.trace_id
        _context_data.data = {**self.old_context, **self.context}

        self.logger.info(f"Operation started: {self.operation}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        duration = time.time() - self.start_time

        if exc_type:
            self.logger.error(
                f"Operation failed: {self.operation} after {duration:.3f}s - {exc_val}"
            )
        else:
            self.logger.debug(
                f"Operation completed: {self.operation} in {duration:.3f}s"
            )

        _context_data.data = self.old_context


def setup_logger(
    name: str = "mcp-jira",
    level: str | None = None,
    log_to_file: bool = False,
    log_dir: str | None = None,
    log_format: str | None = None,
) -> ContextualLogger:
    """
    Configures and returns a contextual logger.

    Console output goes to stderr: with the stdio transport, stdout carries
    the MCP protocol stream.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, etc.)
        log_to_file: If True, also logs to a rotating file
        log_dir: Directory to store log files
        log_format: Log format

    Returns:
        Configured contextual logger
    """
    logging.setLoggerClass(ContextualLogger)
    logger = logging.getLogger(name)

    log_level = level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT))

    # Reconfiguring replaces the handlers installed by a previous call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(ContextFilter())
    logger.addHandler(console_handler)

    if log_to_file:
        log_directory = log_dir or os.getenv("LOG_DIR", DEFAULT_LOG_DIRECTORY)
        Path(log_directory).mkdir(parents=True, exist_ok=True)

        log_file = Path(log_directory) / f"{name}.log"
        file_handler = RotatingFileHandler(
            log_file, maxBytes=MAX_LOG_SIZE, backupCount=LOG_BACKUP_COUNT
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(ContextFilter())
        logger.addHandler(file_handler)

    logger.propagate = False

    return cast(ContextualLogger, logger)


def log_operation(
    logger: logging.Logger, operation: str, **context: Any
) -> LoggingContextManager:
    """
    Creates a context manager for operation logging.

    Args:
        logger: Contextual logger
        operation: Name of the operation
        **context: Additional context data

    Returns:
        Context manager configured for operation logging
    """
    return LoggingContextManager(logger, operation, **context)
