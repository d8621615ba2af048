"""
Configuration validation utilities.

Each function turns one raw TOML table into its validated dataclass.
Missing keys fall back to the dataclass defaults.
"""

import logging
from pathlib import Path
from typing import Any, Dict

from ..models.config import (
    AppConfig,
    CommandConfig,
    LoggingConfig,
    PidFileConfig,
    ProcessConfig,
)
from ..validation import (
    ValidationError,
    validate_boolean,
    validate_enum_choice,
    validate_path_exists,
    validate_positive_integer,
)

logger = logging.getLogger(__name__)

PLATFORM_CHOICES = ["auto", "procfs", "psutil"]
LOG_LEVEL_CHOICES = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _require_table(data: Any, name: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValidationError(f"[{name}] must be a table", field_name=name, value=data)
    return data


def validate_process_config(process_data: Dict[str, Any]) -> ProcessConfig:
    """
    Validate and create a ProcessConfig from the raw ``[process]`` table.

    Raises:
        ValidationError: If validation fails
    """
    process_data = _require_table(process_data, "process")
    defaults = ProcessConfig()

    platform = validate_enum_choice(
        process_data.get("platform", defaults.platform),
        choices=PLATFORM_CHOICES,
        field_name="process.platform",
    )

    proc_root = process_data.get("proc_root", str(defaults.proc_root))
    if not isinstance(proc_root, str) or not proc_root.strip():
        raise ValidationError(
            "process.proc_root must be a non-empty string",
            field_name="process.proc_root",
            value=proc_root,
        )
    # Only an explicit procfs backend must find the tree at load time;
    # "auto" may still pick psutil on hosts without one.
    if platform == "procfs":
        validate_path_exists(proc_root, field_name="process.proc_root")

    pid_max_fallback = validate_positive_integer(
        process_data.get("pid_max_fallback", defaults.pid_max_fallback),
        min_value=2,
        field_name="process.pid_max_fallback",
    )

    return ProcessConfig(
        platform=platform,
        proc_root=Path(proc_root),
        pid_max_fallback=pid_max_fallback,
    )


def validate_command_config(command_data: Dict[str, Any]) -> CommandConfig:
    """
    Validate and create a CommandConfig from the raw ``[command]`` table.

    Raises:
        ValidationError: If validation fails
    """
    command_data = _require_table(command_data, "command")
    defaults = CommandConfig()

    shell = command_data.get("shell", defaults.shell)
    if shell is not None and (not isinstance(shell, str) or not shell.strip()):
        raise ValidationError(
            "command.shell must be a non-empty string",
            field_name="command.shell",
            value=shell,
        )

    read_chunk_size = validate_positive_integer(
        command_data.get("read_chunk_size", defaults.read_chunk_size),
        min_value=1,
        max_value=16 * 1024 * 1024,
        field_name="command.read_chunk_size",
    )

    return CommandConfig(shell=shell, read_chunk_size=read_chunk_size)


def validate_pidfile_config(pidfile_data: Dict[str, Any]) -> PidFileConfig:
    """Validate and create a PidFileConfig from the raw ``[pidfile]`` table."""
    pidfile_data = _require_table(pidfile_data, "pidfile")
    create_parent_dirs = validate_boolean(
        pidfile_data.get("create_parent_dirs", PidFileConfig().create_parent_dirs),
        field_name="pidfile.create_parent_dirs",
    )
    return PidFileConfig(create_parent_dirs=create_parent_dirs)


def validate_logging_config(logging_data: Dict[str, Any]) -> LoggingConfig:
    """Validate and create a LoggingConfig from the raw ``[logging]`` table."""
    logging_data = _require_table(logging_data, "logging")
    level = validate_enum_choice(
        logging_data.get("level", LoggingConfig().level),
        choices=LOG_LEVEL_CHOICES,
        field_name="logging.level",
        case_sensitive=False,
    )
    return LoggingConfig(level=level)


def validate_app_config(config_data: Dict[str, Any]) -> AppConfig:
    """
    Validate a complete parsed configuration file.

    Args:
        config_data: Parsed TOML document

    Returns:
        Validated AppConfig instance

    Raises:
        ValidationError: If any table fails validation
    """
    unknown = set(config_data) - {"process", "command", "pidfile", "logging"}
    if unknown:
        logger.warning(f"Ignoring unknown configuration tables: {sorted(unknown)}")

    return AppConfig(
        process=validate_process_config(config_data.get("process", {})),
        command=validate_command_config(config_data.get("command", {})),
        pidfile=validate_pidfile_config(config_data.get("pidfile", {})),
        logging=validate_logging_config(config_data.get("logging", {})),
    )
