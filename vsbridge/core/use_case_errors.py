"""Use case error handling utilities.

Provides consistent exception handling for the bridge's use cases. The
bridge is invoked by a tool that never reads its output or exit status, so
use cases return error responses instead of raising (except for
KeyboardInterrupt/SystemExit) and failures only ever reach the log.

Design principles:
1. KeyboardInterrupt and SystemExit are always re-raised (never caught)
2. BridgeDomainError subclasses carry their own message and hint
3. Unexpected exceptions are logged with a traceback
4. Use cases return responses with success/error fields
"""

import logging

from vsbridge.domain.exceptions import BridgeDomainError

logger = logging.getLogger(__name__)


def format_error_message(exception: Exception, operation_name: str) -> str:
    """Format an exception into a readable error message.

    - BridgeDomainError: its message, followed by the hint if any
    - OSError: adds context about the OS refusing the operation
    - ValueError/RuntimeError: includes the operation name
    - Other exceptions: a generic "internal error" message

    Args:
        exception: The exception that was caught.
        operation_name: Name of the operation (e.g., "navigation").

    Returns:
        Error message string.

    Example:
        try:
            result = self._do_work()
        except (KeyboardInterrupt, SystemExit):
            raise
        except Exception as e:
            log_use_case_error(e, "launch")
            return Response.create_error(format_error_message(e, "launch"))
    """
    if isinstance(exception, BridgeDomainError):
        if exception.hint:
            return f"{exception.message}. {exception.hint}"
        return exception.message
    elif isinstance(exception, OSError):
        return f"OS error during {operation_name}: {exception}"
    elif isinstance(exception, (ValueError, RuntimeError)):
        return f"{operation_name.capitalize()} error: {exception}"
    else:
        return f"Internal error during {operation_name}. Check logs for details."


def log_use_case_error(exception: Exception, operation_name: str) -> None:
    """Log an exception from a use case with appropriate severity.

    - BridgeDomainError, OSError, ValueError, RuntimeError: ERROR level
    - Other exceptions: EXCEPTION level (includes traceback)

    Args:
        exception: The exception that was caught.
        operation_name: Name of the operation for log messages.
    """
    if isinstance(exception, BridgeDomainError):
        logger.error(exception.message)
    elif isinstance(exception, OSError):
        logger.error(f"OS error during {operation_name}: {exception}")
    elif isinstance(exception, (ValueError, RuntimeError)):
        logger.error(f"Error during {operation_name}: {exception}")
    else:
        logger.exception(f"Unexpected error during {operation_name}")
