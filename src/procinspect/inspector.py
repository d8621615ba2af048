"""
Configured entry points.

``ProcessInspector`` wires the four components to one platform backend
and identity provider built from the active configuration. The
module-level functions delegate to a lazily created global instance, so a
host service can simply call ``procinspect.is_pid_available(path)``.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .config import get_config
from .models.config import AppConfig
from .models.result import Result
from .platform.base import ProcessIdentity, ProcessPlatform
from .platform.factory import create_platform
from .system import CommandRunner, ExeInfoResolver, PidOracle, ProcessNamer
from .system.pid_oracle import PathLike

logger = logging.getLogger(__name__)


class ProcessInspector:
    """
    The four process components sharing one backend.

    Args:
        config: Configuration to build from; defaults to get_config()
        platform: Backend override, mainly for tests
        identity: Identity provider override, mainly for tests
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        platform: Optional[ProcessPlatform] = None,
        identity: Optional[ProcessIdentity] = None,
    ):
        self.config = config or get_config()
        self.platform = platform or create_platform(
            self.config.process.platform, self.config.process.proc_root
        )
        self.identity = identity or ProcessIdentity()

        self.exe_info = ExeInfoResolver(self.platform, self.identity)
        self.namer = ProcessNamer(self.platform, self.identity)
        self.pid_oracle = PidOracle(
            self.platform,
            self.identity,
            pid_max_fallback=self.config.process.pid_max_fallback,
            create_parent_dirs=self.config.pidfile.create_parent_dirs,
        )
        self.runner = CommandRunner(
            shell=self.config.command.shell,
            read_chunk_size=self.config.command.read_chunk_size,
        )
        logger.debug(f"ProcessInspector initialized with {self.platform!r}")


# Global inspector instance
_inspector: Optional[ProcessInspector] = None


def get_inspector() -> ProcessInspector:
    """Get the global inspector instance, building it from get_config()."""
    global _inspector
    if _inspector is None:
        _inspector = ProcessInspector()
    return _inspector


def reset_inspector() -> None:
    """Drop the global inspector so the next call rebuilds it."""
    global _inspector
    _inspector = None


def get_exe_path(pid: Optional[int] = None) -> Result[str]:
    """Resolve the executable path of ``pid`` (default: this process)."""
    return get_inspector().exe_info.get_exe_path(pid)


def get_exe_cwd(pid: Optional[int] = None) -> Result[str]:
    """Resolve the working directory of ``pid`` (default: this process)."""
    return get_inspector().exe_info.get_exe_cwd(pid)


def get_process_name(pid: Optional[int] = None) -> Result[str]:
    """Resolve the registered name of ``pid`` (default: this process)."""
    return get_inspector().namer.get_process_name(pid)


def max_pid() -> int:
    """Return the platform's pid ceiling."""
    return get_inspector().pid_oracle.max_pid()


def is_pid_available(pid: Union[int, PathLike]) -> Result[None]:
    """Check whether a pid, or the pid recorded in a pid file, is free."""
    return get_inspector().pid_oracle.is_pid_available(pid)


def read_pid_file(path: PathLike) -> Result[int]:
    """Read the pid recorded in a pid file."""
    return get_inspector().pid_oracle.read_pid_file(path)


def make_pid_file(path: PathLike, pid: Optional[int] = None) -> Result[None]:
    """Record ``pid`` (default: this process) in a pid file."""
    return get_inspector().pid_oracle.make_pid_file(path, pid)


def run_command(shell_line: str, cwd: Optional[Union[str, Path]] = None) -> Result[bytes]:
    """Run a shell command and return all of its stdout."""
    return get_inspector().runner.run_command(shell_line, cwd=cwd)
