"""
Pytest configuration and shared fixtures for the procinspect test suite.

This module provides common fixtures, a fake platform backend, and
configuration cleanup for all test modules.
"""

import errno
import os
import shutil
import sys
import tempfile
from pathlib import Path
from typing import Dict, Optional

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from procinspect.platform.base import ProcessPlatform


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def fake_proc_root(temp_dir):
    """
    Build a miniature proc tree.

    pid 4242 has exe/cwd links and a comm record; pid_max is 32768.
    """
    root = temp_dir / "proc"
    pid_dir = root / "4242"
    pid_dir.mkdir(parents=True)
    os.symlink("/usr/local/bin/storaged", pid_dir / "exe")
    os.symlink("/var/lib/storaged/../storaged", pid_dir / "cwd")
    (pid_dir / "comm").write_text("storaged\n")

    kernel_dir = root / "sys" / "kernel"
    kernel_dir.mkdir(parents=True)
    (kernel_dir / "pid_max").write_text("32768\n")
    return root


# ============================================================================
# Fake Platform
# ============================================================================


class FakePlatform(ProcessPlatform):
    """
    In-memory platform backend.

    Args:
        processes: pid -> dict with optional "exe", "cwd", "comm" entries;
            a value of PermissionError makes that read fail with EACCES
        foreign: pids that exist but may not be signalled (EPERM)
        pid_max: value returned by read_pid_max(), or None to fail
    """

    name = "fake"

    def __init__(
        self,
        processes: Optional[Dict[int, Dict[str, object]]] = None,
        foreign=(),
        pid_max: Optional[int] = 32768,
    ):
        self.processes = processes or {}
        self.foreign = set(foreign)
        self.pid_max = pid_max
        self.probed = []
        self.pid_max_reads = 0

    def _read(self, pid: int, field: str) -> str:
        if pid not in self.processes:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory")
        value = self.processes[pid].get(field)
        if value is PermissionError:
            raise PermissionError(errno.EACCES, "Permission denied")
        if value is None:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory")
        return value

    def read_exe_link(self, pid: int) -> str:
        return self._read(pid, "exe")

    def read_cwd_link(self, pid: int) -> str:
        return self._read(pid, "cwd")

    def read_comm(self, pid: int) -> str:
        return self._read(pid, "comm")

    def probe(self, pid: int) -> None:
        self.probed.append(pid)
        if pid in self.foreign:
            raise PermissionError(errno.EPERM, "Operation not permitted")
        if pid not in self.processes:
            raise ProcessLookupError(errno.ESRCH, "No such process")

    def read_pid_max(self) -> int:
        self.pid_max_reads += 1
        if self.pid_max is None:
            raise OSError(errno.ENOSYS, "Function not implemented")
        return self.pid_max


@pytest.fixture
def fake_platform():
    """A fake backend with init (1), the test's "self" (100) and a peer (200)."""
    return FakePlatform(
        processes={
            1: {"exe": PermissionError, "cwd": PermissionError, "comm": "systemd"},
            100: {"exe": "/opt/svc/bin/svc", "cwd": "/srv/svc", "comm": "svc"},
            200: {"exe": "/usr/bin/peer", "cwd": "/", "comm": "peer"},
        },
        foreign={300},
    )


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def config_file(temp_dir):
    """Write a complete configuration file and return its path."""
    import toml

    config_path = temp_dir / "config.toml"
    with open(config_path, "w") as f:
        toml.dump(
            {
                "process": {"platform": "psutil", "pid_max_fallback": 65536},
                "command": {"shell": "/bin/sh", "read_chunk_size": 512},
                "pidfile": {"create_parent_dirs": True},
                "logging": {"level": "debug"},
            },
            f,
        )
    return config_path


@pytest.fixture(autouse=True)
def clear_config_after_test():
    """Automatically reset configuration and the global inspector after each test."""
    yield

    from procinspect.config import set_config_path
    from procinspect.inspector import reset_inspector

    set_config_path(None)
    reset_inspector()


@pytest.fixture
def make_platform():
    """Factory for FakePlatform instances with custom process tables."""
    return FakePlatform
