"""
Exception types and error handling helpers.

Process queries report expected failures through ``Result`` values (see
``procinspect.models.result``). The exceptions defined here cover the two
remaining cases: invalid configuration, and callers that explicitly ask for
an exception via ``Result.unwrap()``.
"""

import errno
import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Union

if TYPE_CHECKING:
    from ..models.result import ErrorKind, ProcessError

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Severity levels for error handling."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ValidationError(Exception):
    """
    Exception raised when validation fails.

    Used by the configuration validators; never raised by process queries.
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Any = None, severity: ErrorSeverity = ErrorSeverity.ERROR):
        super().__init__(message)
        self.field_name = field_name
        self.value = value
        self.severity = severity


class ProcessInspectError(Exception):
    """Raised by ``Result.unwrap()`` when the result holds a failure."""

    def __init__(self, error: "ProcessError"):
        super().__init__(f"{error.kind.name}: {error.message}")
        self.error = error

    @property
    def kind(self) -> "ErrorKind":
        return self.error.kind


def error_kind_for_os_error(error: OSError) -> "ErrorKind":
    """
    Map an OSError onto the library's error taxonomy.

    Args:
        error: The OS-level error raised by a filesystem or process call

    Returns:
        NOT_FOUND for missing files and processes, ACCESS_DENIED for
        permission errors, IO_ERROR for everything else.
    """
    from ..models.result import ErrorKind

    if isinstance(error, (FileNotFoundError, ProcessLookupError)):
        return ErrorKind.NOT_FOUND
    if isinstance(error, PermissionError):
        return ErrorKind.ACCESS_DENIED
    if error.errno in (errno.ENOENT, errno.ESRCH):
        return ErrorKind.NOT_FOUND
    if error.errno in (errno.EACCES, errno.EPERM):
        return ErrorKind.ACCESS_DENIED
    return ErrorKind.IO_ERROR


def handle_error(
    error: Exception,
    context: str,
    severity: Union[ErrorSeverity, str] = ErrorSeverity.ERROR,
    reraise: bool = True,
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Handle errors with consistent logging and optional re-raising.

    Args:
        error: The exception that occurred
        context: Context description of where the error occurred
        severity: Severity level for logging
        reraise: Whether to re-raise the exception after logging
        logger: Logger instance to use (defaults to module logger)
    """
    effective_logger = logger or globals()['logger']

    error_msg = f"Error in {context}: {error}"

    if isinstance(severity, str):
        severity_str = severity.lower()
    else:
        severity_str = severity.value

    if severity_str == "debug":
        effective_logger.debug(error_msg, exc_info=True)
    elif severity_str == "info":
        effective_logger.info(error_msg)
    elif severity_str == "warning":
        effective_logger.warning(error_msg)
    elif severity_str == "error":
        effective_logger.error(error_msg)
    elif severity_str == "critical":
        effective_logger.critical(error_msg, exc_info=True)

    if reraise:
        raise error


def handle_config_error(error: Exception, context: str, **kwargs) -> None:
    """Handle configuration-related errors."""
    handle_error(error, f"config {context}", **kwargs)
