"""
Data models for the procinspect package.

Result Models:
- Result and ProcessError, returned by every process query
- ErrorKind, the failure taxonomy

Configuration Models:
- Per-table settings assembled into AppConfig
"""

from .config import (
    DEFAULT_PID_MAX_FALLBACK,
    AppConfig,
    CommandConfig,
    LoggingConfig,
    PidFileConfig,
    ProcessConfig,
)
from .result import ErrorKind, ProcessError, Result

__all__ = [
    "DEFAULT_PID_MAX_FALLBACK",
    "AppConfig",
    "CommandConfig",
    "LoggingConfig",
    "PidFileConfig",
    "ProcessConfig",
    "ErrorKind",
    "ProcessError",
    "Result",
]
