"""
Defines the platform capability interface used by all process queries.

This module provides:
- ProcessPlatform: an abstract base class (ABC) describing the OS facts the
  rest of the package needs (per-process links, comm name, liveness probe,
  pid ceiling), with one implementation per target OS.
- ProcessIdentity / FixedIdentity: providers of the "current process" pid
  used whenever a query is called without an explicit pid.
"""

import logging
import os
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class ProcessPlatform(ABC):
    """
    Abstract base class for OS-specific process probing.

    Implementations raise ``OSError`` subclasses for every failure:
    ``ProcessLookupError`` or ``FileNotFoundError`` when the process does
    not exist, ``PermissionError`` when it exists but may not be inspected.
    Callers translate these into ``Result`` failures.
    """

    name: str = "abstract"

    @abstractmethod
    def read_exe_link(self, pid: int) -> str:
        """
        Return the path of the executable backing ``pid``.

        Raises:
            OSError: If the process is missing or its link is unreadable
        """
        pass

    @abstractmethod
    def read_cwd_link(self, pid: int) -> str:
        """
        Return the current working directory of ``pid``.

        Raises:
            OSError: If the process is missing or its link is unreadable
        """
        pass

    @abstractmethod
    def read_comm(self, pid: int) -> str:
        """
        Return the short name the OS registered for ``pid``.

        Raises:
            OSError: If the process is missing or its name is unreadable
        """
        pass

    def probe(self, pid: int) -> None:
        """
        Send the zero signal to ``pid``.

        Returns normally when the process exists and may be signalled.

        Raises:
            ProcessLookupError: If no such process exists
            PermissionError: If it exists but belongs to another user
            OSError: For any other failure
        """
        os.kill(pid, 0)

    @abstractmethod
    def read_pid_max(self) -> int:
        """
        Return the largest pid the OS hands out.

        Raises:
            OSError: If the limit cannot be read
            ValueError: If the limit is not an integer
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class ProcessIdentity:
    """Provides the pid of the calling process."""

    def pid(self) -> int:
        return os.getpid()


class FixedIdentity(ProcessIdentity):
    """Identity provider that always reports the same pid."""

    def __init__(self, pid: int):
        self._pid = pid

    def pid(self) -> int:
        return self._pid

    def __repr__(self) -> str:
        return f"FixedIdentity({self._pid})"
