"""
Error handling for the controller layer.

The status table is a pure function of ErrorKind; the decorator is the only
place where a failure becomes a transport status.
"""

import inspect
import logging
from functools import wraps
from typing import Callable, Dict

from entitykit.constants import ErrorKind, HTTPStatus
from entitykit.dtos import ControllerResponse
from entitykit.exceptions import ApplicationError
from entitykit.utils.logging_utils import logging_context

logger = logging.getLogger(__name__)


ERROR_STATUS: Dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.ID_ALREADY_EXISTS: HTTPStatus.CONFLICT,
    ErrorKind.ID_REQUIRED: HTTPStatus.BAD_REQUEST,
    ErrorKind.ID_MISMATCH: HTTPStatus.BAD_REQUEST,
    ErrorKind.VALIDATION_FAILED: HTTPStatus.BAD_REQUEST,
    ErrorKind.STORE_FAILURE: HTTPStatus.INTERNAL_SERVER_ERROR,
    ErrorKind.CONFIGURATION: HTTPStatus.INTERNAL_SERVER_ERROR,
    ErrorKind.INTERNAL: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def status_for_error(kind: ErrorKind) -> int:
    """
    Map an error kind to its transport status.

    Args:
        kind: Failure kind raised by the service

    Returns:
        HTTP status code
    """
    return ERROR_STATUS.get(kind, HTTPStatus.INTERNAL_SERVER_ERROR)


def handle_controller_errors(operation_name: str):
    """
    Decorator translating failures into ControllerResponse objects.

    ApplicationErrors map through status_for_error; any other exception is
    an internal error. Client-caused failures are logged as warnings, the
    rest as errors with traceback. Structured log records emitted inside
    the call carry ``request_operation``.

    Args:
        operation_name: Human-readable name of the operation (e.g. "Create widget")

    Example:
        @handle_controller_errors("Get entity")
        def get(self, id):
            ...
    """
    def _error_response(e: Exception) -> ControllerResponse:
        if isinstance(e, ApplicationError):
            status_code = status_for_error(e.kind)
            if ErrorKind.is_client_error(e.kind):
                logger.warning(f"{operation_name} - {e.kind.value}: {e.message}")
            else:
                logger.error(f"{operation_name} - {e.kind.value}: {e.message}", exc_info=True)
            return ControllerResponse(status_code=status_code, detail=e.message)

        logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=True)
        return ControllerResponse(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed. Please check server logs or contact support."
        )

    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                with logging_context(request_operation=operation_name):
                    return await func(*args, **kwargs)
            except Exception as e:
                return _error_response(e)

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                with logging_context(request_operation=operation_name):
                    return func(*args, **kwargs)
            except Exception as e:
                return _error_response(e)

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
