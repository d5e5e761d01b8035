"""Tests for the capture process handle."""

import sys

import pytest

from screenrec.core.errors import LaunchError
from screenrec.process import ProcessHandle, spawn


SLEEPER = ["-c", "import time; time.sleep(30)"]


class TestProcessHandle:
    """Tests for launching and killing real child processes."""

    def test_spawn_and_kill(self, tmp_path):
        """Test that a long-running process starts and is killed."""
        handle = spawn(sys.executable, SLEEPER, log_path=tmp_path / "tool.log", startup_grace=0.05)

        assert handle.is_running()
        assert handle.pid is not None

        handle.kill()

        assert not handle.is_running()
        assert handle.returncode is not None

    def test_kill_is_noop_after_exit(self, tmp_path):
        """Test that killing an exited process does nothing."""
        handle = spawn(sys.executable, ["-c", "pass"], startup_grace=0.3)

        handle.kill()
        handle.kill()

        assert not handle.is_running()

    def test_kill_before_execute_is_noop(self):
        """Test that kill on a never-started handle does nothing."""
        handle = ProcessHandle(sys.executable, SLEEPER)
        handle.kill()
        assert handle.pid is None

    def test_missing_command_raises_launch_error(self):
        """Test that an unknown executable raises LaunchError."""
        with pytest.raises(LaunchError):
            spawn("screenrec-no-such-tool-xyz", [], startup_grace=0)

    def test_early_exit_raises_launch_error_with_output(self, tmp_path):
        """Test that a non-zero exit during the grace period is a launch failure."""
        script = "import sys; print('permission denied'); sys.exit(3)"

        with pytest.raises(LaunchError) as exc_info:
            spawn(sys.executable, ["-c", script], log_path=tmp_path / "tool.log", startup_grace=3.0)

        assert "code 3" in str(exc_info.value)
        assert "permission denied" in str(exc_info.value)

    def test_execute_twice_raises(self):
        """Test that a handle can only be executed once."""
        handle = spawn(sys.executable, SLEEPER, startup_grace=0)
        try:
            with pytest.raises(LaunchError):
                handle.execute()
        finally:
            handle.kill()
