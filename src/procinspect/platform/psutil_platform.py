"""
psutil backend for hosts without a Linux-style /proc.

psutil reports failures with its own exception hierarchy; this backend
translates them into the ``OSError`` subclasses the rest of the package
expects, so callers never need to import psutil.
"""

import errno
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import psutil

from .base import ProcessPlatform

logger = logging.getLogger(__name__)

# Default kern.pid_max on macOS and the BSDs.
BSD_PID_MAX = 99999


@contextmanager
def _translate_psutil_errors(pid: int) -> Iterator[None]:
    try:
        yield
    except psutil.NoSuchProcess as e:
        # ZombieProcess is a NoSuchProcess: a zombie has no exe, cwd or name left
        raise ProcessLookupError(errno.ESRCH, f"No such process: {pid}") from e
    except psutil.AccessDenied as e:
        raise PermissionError(errno.EACCES, f"Access denied to process {pid}") from e


class PsutilPlatform(ProcessPlatform):
    """Process probing through psutil."""

    name = "psutil"

    def read_exe_link(self, pid: int) -> str:
        with _translate_psutil_errors(pid):
            exe = psutil.Process(pid).exe()
        if not exe:
            raise FileNotFoundError(errno.ENOENT, f"Executable of process {pid} is unknown")
        return exe

    def read_cwd_link(self, pid: int) -> str:
        with _translate_psutil_errors(pid):
            cwd = psutil.Process(pid).cwd()
        if not cwd:
            raise FileNotFoundError(errno.ENOENT, f"Working directory of process {pid} is unknown")
        return cwd

    def read_comm(self, pid: int) -> str:
        if psutil.LINUX:
            # Process.name() extends names truncated to 15 characters from
            # the cmdline; the kernel's own record is wanted here.
            with open(Path("/proc") / str(pid) / "comm", "r", encoding="utf-8", errors="replace") as f:
                line = f.readline()
            return line[:-1] if line.endswith("\n") else line
        with _translate_psutil_errors(pid):
            return psutil.Process(pid).name()

    def probe(self, pid: int) -> None:
        if psutil.POSIX:
            super().probe(pid)
            return
        # os.kill() terminates the target on Windows; never use it as a probe there
        if not psutil.pid_exists(pid):
            raise ProcessLookupError(errno.ESRCH, f"No such process: {pid}")

    def read_pid_max(self) -> int:
        if psutil.LINUX:
            with open(Path("/proc/sys/kernel/pid_max"), "r") as f:
                return int(f.readline().strip())
        if psutil.MACOS or psutil.BSD:
            return BSD_PID_MAX
        raise OSError(errno.ENOSYS, "pid_max is not exposed on this platform")
