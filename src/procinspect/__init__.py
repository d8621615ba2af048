"""
procinspect: process introspection primitives for long-running services.

This package answers questions a server or daemon asks about itself and
about other processes on the same machine, and runs external commands:

- config: Configuration management and validation
- models: Result/error types and configuration dataclasses
- validation: Exception types and configuration validators
- platform: OS-specific probing behind a capability interface
- system: The query components (exe info, pid oracle, names, commands)

Usage:
    from procinspect import is_pid_available, make_pid_file

    status = is_pid_available("/run/myservice.pid")
    if not status.ok:
        raise SystemExit(f"Another instance is running: {status.error}")
    make_pid_file("/run/myservice.pid").unwrap()
"""

# Main interfaces
from .config import clear_config_cache, get_config, set_config_path
from .inspector import (
    ProcessInspector,
    get_exe_cwd,
    get_exe_path,
    get_inspector,
    get_process_name,
    is_pid_available,
    make_pid_file,
    max_pid,
    read_pid_file,
    reset_inspector,
    run_command,
)
from .logging_setup import setup_logging

# Model classes for external use
from .models import AppConfig, ErrorKind, ProcessError, Result

# Platform backends
from .platform import (
    FixedIdentity,
    ProcessIdentity,
    ProcessPlatform,
    ProcfsPlatform,
    PsutilPlatform,
    create_platform,
)

# Components
from .system import CommandRunner, ExeInfoResolver, PidOracle, ProcessNamer

# Validation utilities
from .validation import ProcessInspectError, ValidationError

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "get_config",
    "clear_config_cache",
    "set_config_path",
    "setup_logging",
    "ProcessInspector",
    "get_inspector",
    "reset_inspector",
    "get_exe_path",
    "get_exe_cwd",
    "get_process_name",
    "max_pid",
    "is_pid_available",
    "read_pid_file",
    "make_pid_file",
    "run_command",
    # Models
    "AppConfig",
    "ErrorKind",
    "ProcessError",
    "Result",
    # Platform
    "FixedIdentity",
    "ProcessIdentity",
    "ProcessPlatform",
    "ProcfsPlatform",
    "PsutilPlatform",
    "create_platform",
    # Components
    "CommandRunner",
    "ExeInfoResolver",
    "PidOracle",
    "ProcessNamer",
    # Errors
    "ProcessInspectError",
    "ValidationError",
]
