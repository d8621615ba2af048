"""
Linux /proc backend.

Reads per-process facts straight from the proc filesystem:
``/proc/<pid>/exe`` and ``/proc/<pid>/cwd`` symlinks, the
``/proc/<pid>/comm`` record, and ``/proc/sys/kernel/pid_max``.
"""

import logging
import os
from pathlib import Path
from typing import Union

from .base import ProcessPlatform

logger = logging.getLogger(__name__)


class ProcfsPlatform(ProcessPlatform):
    """
    Process probing through a proc filesystem.

    Args:
        proc_root: Mount point of the proc filesystem. Tests point this at
            a fake tree.
    """

    name = "procfs"

    def __init__(self, proc_root: Union[str, Path] = "/proc"):
        self.proc_root = Path(proc_root)

    def _pid_dir(self, pid: int) -> Path:
        return self.proc_root / str(pid)

    def read_exe_link(self, pid: int) -> str:
        return os.readlink(self._pid_dir(pid) / "exe")

    def read_cwd_link(self, pid: int) -> str:
        return os.readlink(self._pid_dir(pid) / "cwd")

    def read_comm(self, pid: int) -> str:
        with open(self._pid_dir(pid) / "comm", "r", encoding="utf-8", errors="replace") as f:
            line = f.readline()
        # The kernel terminates the record with a single newline; the name
        # itself may legitimately contain spaces.
        return line[:-1] if line.endswith("\n") else line

    def read_pid_max(self) -> int:
        pid_max_file = self.proc_root / "sys" / "kernel" / "pid_max"
        with open(pid_max_file, "r") as f:
            return int(f.readline().strip())

    def __repr__(self) -> str:
        return f"ProcfsPlatform(proc_root={str(self.proc_root)!r})"
