"""
Process name lookup.
"""

import logging
from typing import Optional

from ..models.result import ErrorKind, Result
from .base import ProcessQuery, failure_from_os_error

logger = logging.getLogger(__name__)


class ProcessNamer(ProcessQuery):
    """Resolves the name the OS registered for a process."""

    def get_process_name(self, pid: Optional[int] = None) -> Result[str]:
        """
        Return the short registered ("comm") name of ``pid``.

        The name is returned verbatim, including the platform's truncation
        (15 characters on Linux). Callers matching a binary name must do
        their own substring matching.

        Args:
            pid: Process to inspect; defaults to the calling process

        Returns:
            Result holding the name, or NOT_FOUND if no such process exists
        """
        pid = self.resolve_pid(pid)
        if pid < 0:
            return Result.failure(ErrorKind.INVALID_ARGUMENT, f"Invalid pid {pid}", pid=pid)
        try:
            name = self.platform.read_comm(pid)
        except OSError as e:
            logger.debug(f"Reading name of pid {pid} failed: {e}")
            return failure_from_os_error(e, f"Cannot read name of process {pid}", pid=pid)
        return Result.success(name)
