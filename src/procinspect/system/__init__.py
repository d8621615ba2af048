"""
Process introspection and command execution.

This package provides the four query/action components:

- ExeInfoResolver: executable path and working directory of a pid
- PidOracle: pid availability, pid files, and the pid ceiling
- ProcessNamer: registered name of a pid
- CommandRunner: run a shell command and capture all of its stdout

Each component is stateless apart from its injected platform backend and
identity provider, and none calls into another.
"""

from .base import ProcessQuery, failure_from_os_error
from .commands import CommandRunner
from .exe_info import ExeInfoResolver
from .pid_oracle import RESERVED_PIDS, PidOracle
from .process_name import ProcessNamer

__all__ = [
    "CommandRunner",
    "ExeInfoResolver",
    "PidOracle",
    "ProcessNamer",
    "ProcessQuery",
    "RESERVED_PIDS",
    "failure_from_os_error",
]
