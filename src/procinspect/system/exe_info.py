"""
Executable path and working directory lookup.
"""

import logging
import os
from typing import Callable, Optional

from ..models.result import ErrorKind, Result
from .base import ProcessQuery, failure_from_os_error

logger = logging.getLogger(__name__)


class ExeInfoResolver(ProcessQuery):
    """Resolves where a process's binary lives and where it is running."""

    def get_exe_path(self, pid: Optional[int] = None) -> Result[str]:
        """
        Resolve the absolute path of the executable backing ``pid``.

        Args:
            pid: Process to inspect; defaults to the calling process

        Returns:
            Result holding the normalized absolute path. Fails with
            NOT_FOUND when the process does not exist and ACCESS_DENIED
            when its link may not be read (e.g. pid 1 for non-root callers).
        """
        return self._resolve_link(pid, "exe", self.platform.read_exe_link)

    def get_exe_cwd(self, pid: Optional[int] = None) -> Result[str]:
        """
        Resolve the current working directory of ``pid``.

        Args:
            pid: Process to inspect; defaults to the calling process

        Returns:
            Result holding the normalized absolute path, with the same
            failure modes as get_exe_path().
        """
        return self._resolve_link(pid, "cwd", self.platform.read_cwd_link)

    def _resolve_link(
        self, pid: Optional[int], link: str, reader: Callable[[int], str]
    ) -> Result[str]:
        pid = self.resolve_pid(pid)
        if pid < 0:
            return Result.failure(
                ErrorKind.INVALID_ARGUMENT, f"Invalid pid {pid}", pid=pid
            )
        try:
            target = reader(pid)
        except OSError as e:
            logger.debug(f"Reading {link} of pid {pid} failed: {e}")
            return failure_from_os_error(e, f"Cannot resolve {link} of process {pid}", pid=pid)

        if not os.path.isabs(target):
            return Result.failure(
                ErrorKind.IO_ERROR,
                f"The {link} of process {pid} is not an absolute path: {target!r}",
                pid=pid,
            )
        return Result.success(os.path.normpath(target))
