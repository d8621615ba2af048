"""
OS-specific process probing behind a small capability interface.
"""

from .base import FixedIdentity, ProcessIdentity, ProcessPlatform
from .factory import create_platform
from .procfs import ProcfsPlatform
from .psutil_platform import PsutilPlatform

__all__ = [
    "FixedIdentity",
    "ProcessIdentity",
    "ProcessPlatform",
    "ProcfsPlatform",
    "PsutilPlatform",
    "create_platform",
]
