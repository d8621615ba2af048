"""
Platform backend factory.

Selects the ProcessPlatform implementation named in the configuration.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from .base import ProcessPlatform

logger = logging.getLogger(__name__)


def create_platform(
    name: str = "auto",
    proc_root: Optional[Union[str, Path]] = None,
) -> ProcessPlatform:
    """
    Create a platform backend.

    Args:
        name: "procfs", "psutil", or "auto" (procfs on Linux, psutil elsewhere)
        proc_root: Proc filesystem mount point for the procfs backend

    Returns:
        ProcessPlatform instance

    Raises:
        ValueError: If the backend name is unknown
    """
    if name == "auto":
        name = "procfs" if sys.platform.startswith("linux") else "psutil"

    if name == "procfs":
        from .procfs import ProcfsPlatform

        platform = ProcfsPlatform(proc_root if proc_root is not None else "/proc")
    elif name == "psutil":
        from .psutil_platform import PsutilPlatform

        platform = PsutilPlatform()
    else:
        raise ValueError(f"Unknown process platform: {name}")

    logger.debug(f"Using process platform {platform!r}")
    return platform
