"""
Unit tests for configuration validation.
"""

from pathlib import Path

import pytest

from procinspect.config.validators import (
    validate_app_config,
    validate_command_config,
    validate_logging_config,
    validate_pidfile_config,
    validate_process_config,
)
from procinspect.models import AppConfig, DEFAULT_PID_MAX_FALLBACK
from procinspect.validation import ValidationError


@pytest.mark.unit
class TestProcessConfigValidation:
    """Test cases for the [process] table."""

    def test_defaults(self):
        config = validate_process_config({})

        assert config.platform == "auto"
        assert config.proc_root == Path("/proc")
        assert config.pid_max_fallback == DEFAULT_PID_MAX_FALLBACK

    def test_custom_values(self, temp_dir):
        config = validate_process_config(
            {"platform": "procfs", "proc_root": str(temp_dir), "pid_max_fallback": 32768}
        )

        assert config.platform == "procfs"
        assert config.proc_root == temp_dir
        assert config.pid_max_fallback == 32768

    def test_unknown_platform(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_process_config({"platform": "kvm"})

        assert exc_info.value.field_name == "process.platform"

    def test_procfs_requires_existing_root(self, temp_dir):
        with pytest.raises(ValidationError):
            validate_process_config({"platform": "procfs", "proc_root": str(temp_dir / "missing")})

    def test_auto_does_not_require_root(self, temp_dir):
        config = validate_process_config({"platform": "auto", "proc_root": str(temp_dir / "missing")})

        assert config.proc_root == temp_dir / "missing"

    @pytest.mark.parametrize("value", [0, 1, -5, "lots", True])
    def test_invalid_pid_max_fallback(self, value):
        with pytest.raises(ValidationError):
            validate_process_config({"pid_max_fallback": value})

    def test_table_must_be_a_table(self):
        with pytest.raises(ValidationError):
            validate_process_config("procfs")


@pytest.mark.unit
class TestOtherTables:
    """Test cases for [command], [pidfile] and [logging]."""

    def test_command_defaults(self):
        config = validate_command_config({})

        assert config.shell is None
        assert config.read_chunk_size == 4096

    def test_command_custom(self):
        config = validate_command_config({"shell": "/bin/bash", "read_chunk_size": 1})

        assert config.shell == "/bin/bash"
        assert config.read_chunk_size == 1

    @pytest.mark.parametrize("shell", ["", "   ", 5])
    def test_command_bad_shell(self, shell):
        with pytest.raises(ValidationError):
            validate_command_config({"shell": shell})

    def test_command_bad_chunk_size(self):
        with pytest.raises(ValidationError):
            validate_command_config({"read_chunk_size": 0})

    def test_pidfile(self):
        assert validate_pidfile_config({}).create_parent_dirs is False
        assert validate_pidfile_config({"create_parent_dirs": True}).create_parent_dirs is True

    def test_pidfile_requires_boolean(self):
        with pytest.raises(ValidationError):
            validate_pidfile_config({"create_parent_dirs": "yes"})

    def test_logging_level_is_case_insensitive(self):
        assert validate_logging_config({"level": "debug"}).level == "DEBUG"

    def test_logging_bad_level(self):
        with pytest.raises(ValidationError):
            validate_logging_config({"level": "chatty"})


@pytest.mark.unit
def test_validate_app_config_empty_document():
    assert validate_app_config({}) == AppConfig()


@pytest.mark.unit
def test_validate_app_config_ignores_unknown_tables():
    config = validate_app_config({"metrics": {"enabled": True}, "command": {"read_chunk_size": 64}})

    assert config.command.read_chunk_size == 64
