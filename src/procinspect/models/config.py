"""
Configuration data models.

One dataclass per TOML table, assembled into ``AppConfig``. Every field
has a default so that the library works without any configuration file.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Largest pid_max the Linux kernel accepts on 64-bit systems (PID_MAX_LIMIT).
DEFAULT_PID_MAX_FALLBACK = 4194304


@dataclass
class ProcessConfig:
    """
    Settings for process introspection, from the ``[process]`` table.
    """

    # Which platform backend to use: "auto", "procfs" or "psutil".
    platform: str = "auto"
    # Root of the per-process filesystem read by the procfs backend.
    proc_root: Path = Path("/proc")
    # Used by max_pid() when the kernel limit cannot be read.
    pid_max_fallback: int = DEFAULT_PID_MAX_FALLBACK


@dataclass
class CommandConfig:
    """
    Settings for command execution, from the ``[command]`` table.
    """

    # Shell that interprets command lines; None means subprocess's /bin/sh.
    shell: Optional[str] = None
    # Size of each read while draining the child's stdout.
    read_chunk_size: int = 4096


@dataclass
class PidFileConfig:
    """
    Settings for pid file creation, from the ``[pidfile]`` table.
    """

    # Create missing parent directories before writing a pid file.
    create_parent_dirs: bool = False


@dataclass
class LoggingConfig:
    """Settings from the ``[logging]`` table."""

    level: str = "WARNING"


@dataclass
class AppConfig:
    """
    Complete application configuration.
    """

    process: ProcessConfig = field(default_factory=ProcessConfig)
    command: CommandConfig = field(default_factory=CommandConfig)
    pidfile: PidFileConfig = field(default_factory=PidFileConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
