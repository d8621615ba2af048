"""
Shared plumbing for the process query components.
"""

import logging
from typing import Optional

from ..models.result import Result
from ..platform.base import ProcessIdentity, ProcessPlatform
from ..platform.factory import create_platform
from ..validation import error_kind_for_os_error

logger = logging.getLogger(__name__)


def failure_from_os_error(error: OSError, message: str, **details) -> Result:
    """
    Build a failed Result from an OSError.

    Args:
        error: The OS error to classify
        message: What was being attempted, e.g. "Cannot read /proc/1/exe"
        **details: Extra ProcessError fields (pid, path, ...)

    Returns:
        Failed Result whose kind reflects the OS error
    """
    reason = error.strerror or str(error)
    return Result.failure(error_kind_for_os_error(error), f"{message}: {reason}", **details)


class ProcessQuery:
    """
    Base class for components that ask the platform about a pid.

    Args:
        platform: Backend used for probing; defaults to the one suited to
            the running OS
        identity: Provider of the pid used when none is given
    """

    def __init__(
        self,
        platform: Optional[ProcessPlatform] = None,
        identity: Optional[ProcessIdentity] = None,
    ):
        self.platform = platform or create_platform()
        self.identity = identity or ProcessIdentity()

    def resolve_pid(self, pid: Optional[int]) -> int:
        """Return ``pid``, or the calling process's pid when it is None."""
        return self.identity.pid() if pid is None else pid
