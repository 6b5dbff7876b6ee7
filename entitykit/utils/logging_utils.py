"""
Structured Logging Utilities

Provides utilities for adding structured context to log messages and for
logging the start and end of service operations.
"""

import inspect
import logging
from contextlib import contextmanager
from contextvars import ContextVar
from functools import wraps
from typing import Any, Dict, Iterator, Optional

from entitykit.constants import ErrorKind
from entitykit.exceptions import ApplicationError


# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Entity created", extra={"entity": "Widget", "entity_id": 3})
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with structured context."""
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with structured context."""
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with structured context."""
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        """Log error message with structured context."""
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


@contextmanager
def logging_context(**kwargs: Any) -> Iterator[None]:
    """
    Add key-value pairs to every structured log record inside the block.

    Example:
        with logging_context(resource="widgets", operation="create"):
            service.create(model)
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    token = _logging_context.set(context)
    try:
        yield
    finally:
        _logging_context.reset(token)


def log_operation(operation_name: str):
    """
    Decorator to log a service operation's start, end and failure.

    Client-caused failures (see ErrorKind.is_client_error) are logged as
    warnings; anything else is logged as an error with traceback. The
    exception is always re-raised.

    The decorated method's ``self`` may expose ``entity_name``; it is added
    to the log context.

    Args:
        operation_name: Name of the operation
    """
    def decorator(func):
        def _context(args) -> Dict[str, Any]:
            context: Dict[str, Any] = {"operation": operation_name}
            if args and hasattr(args[0], "entity_name"):
                context["entity"] = args[0].entity_name
            return context

        def _log_failure(logger: StructuredLogger, context: Dict[str, Any], e: Exception):
            context["error"] = str(e)
            context["error_type"] = type(e).__name__
            if isinstance(e, ApplicationError) and ErrorKind.is_client_error(e.kind):
                logger.warning(f"{operation_name} rejected: {e.message}", extra=context)
            else:
                logger.error(f"Failed {operation_name}", extra=context, exc_info=True)

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = _context(args)
            logger.debug(f"Starting {operation_name}", extra=context)
            try:
                result = await func(*args, **kwargs)
                logger.debug(f"Completed {operation_name}", extra=context)
                return result
            except Exception as e:
                _log_failure(logger, context, e)
                raise

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = _context(args)
            logger.debug(f"Starting {operation_name}", extra=context)
            try:
                result = func(*args, **kwargs)
                logger.debug(f"Completed {operation_name}", extra=context)
                return result
            except Exception as e:
                _log_failure(logger, context, e)
                raise

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
