"""
Validation and error handling for the procinspect package.

This module provides configuration validation and the exception types
shared across the package.
"""

from .exceptions import (
    ErrorSeverity,
    ProcessInspectError,
    ValidationError,
    error_kind_for_os_error,
    handle_config_error,
    handle_error,
)

from .validators import (
    validate_boolean,
    validate_enum_choice,
    validate_path_exists,
    validate_positive_integer,
)

__all__ = [
    "ErrorSeverity",
    "ProcessInspectError",
    "ValidationError",
    "error_kind_for_os_error",
    "handle_config_error",
    "handle_error",
    "validate_boolean",
    "validate_enum_choice",
    "validate_path_exists",
    "validate_positive_integer",
]
