"""
Unit tests for the /proc backend, run against a fake proc tree.
"""

import pytest

from procinspect.platform import ProcfsPlatform


@pytest.mark.unit
class TestProcfsPlatform:
    """Test cases for ProcfsPlatform."""

    def test_read_exe_link(self, fake_proc_root):
        platform = ProcfsPlatform(fake_proc_root)

        assert platform.read_exe_link(4242) == "/usr/local/bin/storaged"

    def test_read_cwd_link(self, fake_proc_root):
        platform = ProcfsPlatform(fake_proc_root)

        # Links are returned as stored; normalization happens in the resolver
        assert platform.read_cwd_link(4242) == "/var/lib/storaged/../storaged"

    def test_read_comm_strips_only_the_newline(self, fake_proc_root):
        (fake_proc_root / "4242" / "comm").write_text("kworker/0:1 H\n")
        platform = ProcfsPlatform(fake_proc_root)

        assert platform.read_comm(4242) == "kworker/0:1 H"

    def test_read_comm_without_newline(self, fake_proc_root):
        (fake_proc_root / "4242" / "comm").write_text("storaged")
        platform = ProcfsPlatform(fake_proc_root)

        assert platform.read_comm(4242) == "storaged"

    def test_missing_process(self, fake_proc_root):
        platform = ProcfsPlatform(fake_proc_root)

        with pytest.raises(FileNotFoundError):
            platform.read_exe_link(7)
        with pytest.raises(FileNotFoundError):
            platform.read_cwd_link(7)
        with pytest.raises(FileNotFoundError):
            platform.read_comm(7)

    def test_read_pid_max(self, fake_proc_root):
        assert ProcfsPlatform(fake_proc_root).read_pid_max() == 32768

    def test_read_pid_max_garbage(self, fake_proc_root):
        (fake_proc_root / "sys" / "kernel" / "pid_max").write_text("lots\n")

        with pytest.raises(ValueError):
            ProcfsPlatform(fake_proc_root).read_pid_max()

    def test_read_pid_max_missing(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            ProcfsPlatform(temp_dir).read_pid_max()

    def test_repr(self, fake_proc_root):
        assert str(fake_proc_root) in repr(ProcfsPlatform(fake_proc_root))
