"""
Result and error models returned by every process query.

Expected failures (missing process, unreadable pid file, non-zero exit
status) are values, not exceptions: each operation returns a ``Result``
holding either the value or a ``ProcessError`` describing what went wrong.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from ..validation.exceptions import ProcessInspectError

T = TypeVar("T")


class ErrorKind(Enum):
    """Failure taxonomy shared by all operations."""
    NOT_FOUND = "not_found"
    ACCESS_DENIED = "access_denied"
    INVALID_ARGUMENT = "invalid_argument"
    ALREADY_IN_USE = "already_in_use"
    COMMAND_FAILED = "command_failed"
    IO_ERROR = "io_error"


@dataclass(frozen=True)
class ProcessError:
    """
    Description of a failed operation.

    Attributes:
        kind: Category of the failure, for callers that branch on it.
        message: Human-readable reason.
        pid: Process id the operation was about, if any.
        path: Filesystem path involved, if any.
        exit_status: Exit status of a failed command. Negative values are
            the number of the signal that killed it.
        output: Whatever the failed command wrote to stdout before exiting.
    """

    kind: ErrorKind
    message: str
    pid: Optional[int] = None
    path: Optional[str] = None
    exit_status: Optional[int] = None
    output: Optional[bytes] = None

    def __str__(self) -> str:
        return f"{self.kind.name}: {self.message}"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value of type ``T`` or a ``ProcessError``."""

    value: Optional[T] = None
    error: Optional[ProcessError] = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, **details) -> "Result[T]":
        return cls(error=ProcessError(kind=kind, message=message, **details))

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        """Error kind of a failed result, None on success."""
        return self.error.kind if self.error else None

    def unwrap(self) -> T:
        """
        Return the value, raising on failure.

        Raises:
            ProcessInspectError: If the result holds an error
        """
        if self.error is not None:
            raise ProcessInspectError(self.error)
        return self.value

    def __bool__(self) -> bool:
        return self.ok

    def __str__(self) -> str:
        if self.error is not None:
            return str(self.error)
        return f"OK({self.value!r})"
