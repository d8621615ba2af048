"""
Pid availability checks and pid file management.

A pid file records the pid of a running instance of a service. At startup
the service asks whether the recorded pid is still "in use"; if it is,
another instance is alive and the new one should not start.

Reserved pids are never considered available: 0 (the idle/swap task, whose
liveness probe behaves differently across platforms) and 1 (init), nor is
the calling process itself.
"""

import errno
import logging
import os
import re
from pathlib import Path
from typing import Optional, Union

from ..models.config import DEFAULT_PID_MAX_FALLBACK
from ..models.result import ErrorKind, Result
from ..platform.base import ProcessIdentity, ProcessPlatform
from .base import ProcessQuery, failure_from_os_error

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

RESERVED_PIDS = frozenset({0, 1})

_PID_PATTERN = re.compile(r"[0-9]+")


class PidOracle(ProcessQuery):
    """
    Decides whether a pid, or the pid recorded in a pid file, is free.

    Args:
        platform: Backend used for probing
        identity: Provider of the calling process's pid
        pid_max_fallback: Ceiling used when the platform cannot report one
        create_parent_dirs: Whether make_pid_file() creates missing
            parent directories
    """

    def __init__(
        self,
        platform: Optional[ProcessPlatform] = None,
        identity: Optional[ProcessIdentity] = None,
        pid_max_fallback: int = DEFAULT_PID_MAX_FALLBACK,
        create_parent_dirs: bool = False,
    ):
        super().__init__(platform=platform, identity=identity)
        self.pid_max_fallback = pid_max_fallback
        self.create_parent_dirs = create_parent_dirs
        self._max_pid: Optional[int] = None

    def max_pid(self) -> int:
        """
        Return the pid ceiling of the OS; pids it hands out are strictly below it.

        The value is read from the platform on first use and cached; it
        never changes during a process's lifetime.
        """
        if self._max_pid is None:
            try:
                self._max_pid = self.platform.read_pid_max()
            except (OSError, ValueError) as e:
                logger.warning(
                    f"Cannot read pid_max from {self.platform!r}: {e}. "
                    f"Falling back to {self.pid_max_fallback}."
                )
                self._max_pid = self.pid_max_fallback
        return self._max_pid

    def is_pid_available(self, pid: Union[int, PathLike]) -> Result[None]:
        """
        Check whether ``pid`` is free.

        Args:
            pid: A numeric pid, or the path of a pid file

        Returns:
            Successful Result if the pid does not belong to a live process.
            Fails with ALREADY_IN_USE if it does, or if it is reserved
            (0, 1, or the calling process).
        """
        if isinstance(pid, bool):
            return Result.failure(ErrorKind.INVALID_ARGUMENT, f"Invalid pid {pid!r}")
        if isinstance(pid, int):
            return self._check_pid(pid)
        return self.is_pid_file_available(pid)

    def _check_pid(self, pid: int) -> Result[None]:
        if pid == self.identity.pid():
            return Result.failure(
                ErrorKind.ALREADY_IN_USE, f"Pid {pid} is the current process", pid=pid
            )
        if pid in RESERVED_PIDS:
            return Result.failure(
                ErrorKind.ALREADY_IN_USE, f"Pid {pid} is reserved by the system", pid=pid
            )
        if pid < 0 or pid >= self.max_pid():
            return Result.failure(
                ErrorKind.INVALID_ARGUMENT,
                f"Pid {pid} is outside the valid range 0..{self.max_pid() - 1}",
                pid=pid,
            )

        try:
            self.platform.probe(pid)
        except ProcessLookupError:
            logger.debug(f"Pid {pid} is available")
            return Result.success()
        except PermissionError:
            return Result.failure(
                ErrorKind.ALREADY_IN_USE,
                f"Process {pid} already exists but is owned by another user",
                pid=pid,
            )
        except OSError as e:
            if e.errno == errno.ESRCH:
                return Result.success()
            return Result.failure(
                ErrorKind.IO_ERROR,
                f"Cannot probe process {pid}: {e.strerror or e}",
                pid=pid,
            )

        return Result.failure(
            ErrorKind.ALREADY_IN_USE, f"Process {pid} already exists", pid=pid
        )

    def read_pid_file(self, path: PathLike) -> Result[int]:
        """
        Read the pid recorded in a pid file.

        The first line must hold a decimal pid; surrounding whitespace is
        ignored and further lines are allowed.

        Args:
            path: Path of the pid file

        Returns:
            Result holding the pid. Fails with NOT_FOUND if the file does
            not exist, ACCESS_DENIED or IO_ERROR if it cannot be read, and
            INVALID_ARGUMENT if it does not hold a pid.
        """
        path_str = os.fspath(path)
        try:
            with open(path_str, "r", encoding="ascii", errors="replace") as f:
                first_line = f.readline().strip()
        except OSError as e:
            return failure_from_os_error(e, f"Cannot read pid file {path_str}", path=path_str)

        if not _PID_PATTERN.fullmatch(first_line):
            return Result.failure(
                ErrorKind.INVALID_ARGUMENT,
                f"Pid file {path_str} does not contain a pid: {first_line[:32]!r}",
                path=path_str,
            )
        return Result.success(int(first_line))

    def is_pid_file_available(self, path: PathLike) -> Result[None]:
        """
        Check whether the instance recorded in a pid file is gone.

        A missing pid file means no instance claims the slot. A pid file
        that exists but cannot be read or parsed is reported as a failure,
        since it may hide a live process.

        Args:
            path: Path of the pid file

        Returns:
            Successful Result if the file is absent or its pid is available
        """
        path_str = os.fspath(path)
        pid_result = self.read_pid_file(path_str)
        if not pid_result.ok:
            # A dangling symlink still names a pid file someone set up
            if pid_result.kind is ErrorKind.NOT_FOUND and not os.path.lexists(path_str):
                logger.debug(f"Pid file {path_str} does not exist")
                return Result.success()
            return pid_result

        status = self._check_pid(pid_result.value)
        if status.ok:
            return status
        return Result.failure(
            status.error.kind,
            f"{status.error.message} (recorded in {path_str})",
            pid=pid_result.value,
            path=path_str,
        )

    def make_pid_file(self, path: PathLike, pid: Optional[int] = None) -> Result[None]:
        """
        Write ``pid`` to ``path``, creating or truncating the file.

        Args:
            path: Path of the pid file
            pid: Pid to record; defaults to the calling process

        Returns:
            Successful Result once the file is written and closed
        """
        path_str = os.fspath(path)
        if not path_str:
            return Result.failure(ErrorKind.INVALID_ARGUMENT, "Path to the pid file is empty")

        pid = self.resolve_pid(pid)
        if isinstance(pid, bool) or pid < 0:
            return Result.failure(
                ErrorKind.INVALID_ARGUMENT, f"Invalid pid {pid!r}", path=path_str
            )

        parent = Path(path_str).parent
        if self.create_parent_dirs:
            try:
                parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                return failure_from_os_error(e, f"Cannot create {parent}", path=path_str)

        try:
            with open(path_str, "w", encoding="ascii") as f:
                f.write(f"{pid}\n")
        except OSError as e:
            return failure_from_os_error(e, f"Cannot write pid file {path_str}", path=path_str, pid=pid)

        logger.debug(f"Wrote pid {pid} to {path_str}")
        return Result.success()
