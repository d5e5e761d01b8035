"""
Process handle - launch and terminate the native capture tool.
"""

import logging
import subprocess
import time
from pathlib import Path
from typing import IO, List, Optional

from .core.config import KILL_TIMEOUT_SECONDS, STARTUP_GRACE_SECONDS
from .core.errors import LaunchError, ProcessKillError

logger = logging.getLogger(__name__)


class ProcessHandle:
    """One external capture process.

    Output goes to a log file instead of pipes so a long recording can't
    fill the pipe buffer and block the tool.
    """

    def __init__(
        self,
        command: str,
        args: List[str],
        log_path: Optional[Path] = None,
        startup_grace: float = STARTUP_GRACE_SECONDS,
        kill_timeout: float = KILL_TIMEOUT_SECONDS,
    ):
        self.command = command
        self.args = list(args)
        self.log_path = Path(log_path) if log_path else None
        self.startup_grace = startup_grace
        self.kill_timeout = kill_timeout
        self._process: Optional[subprocess.Popen] = None
        self._log_file: Optional[IO] = None

    @property
    def pid(self) -> Optional[int]:
        return self._process.pid if self._process else None

    @property
    def returncode(self) -> Optional[int]:
        return self._process.poll() if self._process else None

    def is_running(self) -> bool:
        """Check if the process was started and has not exited."""
        return self._process is not None and self._process.poll() is None

    def execute(self) -> None:
        """Start the process and check it survives the startup grace period.

        A process that exits with code 0 inside the grace period is accepted:
        launchers like ``powershell Start-Process`` hand off and return.

        Raises:
            LaunchError: If the process can't be started or dies at launch.
        """
        if self._process is not None:
            raise LaunchError(f"{self.command} was already started")

        cmd = [self.command, *self.args]
        stdout = subprocess.DEVNULL
        if self.log_path is not None:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            self._log_file = open(self.log_path, "w")
            stdout = self._log_file

        try:
            self._process = subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=stdout,
                stderr=subprocess.STDOUT,
            )
        except OSError as e:
            self._close_log()
            raise LaunchError(f"Could not start {self.command}: {e}") from e

        logger.info(f"Started {self.command} (pid={self._process.pid})")

        if self.startup_grace > 0:
            time.sleep(self.startup_grace)

        code = self._process.poll()
        if code is not None and code != 0:
            self._close_log()
            raise LaunchError(
                f"{self.command} exited with code {code}: {self._read_log() or 'no output'}"
            )

    def kill(self) -> None:
        """Terminate the process. A no-op if it already exited.

        Raises:
            ProcessKillError: If the signal fails or the process outlives
                the kill timeout.
        """
        if self._process is None:
            return

        try:
            if self._process.poll() is None:
                self._process.kill()
                self._process.wait(timeout=self.kill_timeout)
                logger.info(f"Killed {self.command} (pid={self._process.pid})")
        except subprocess.TimeoutExpired as e:
            raise ProcessKillError(
                f"{self.command} (pid={self._process.pid}) did not exit within {self.kill_timeout}s"
            ) from e
        except OSError as e:
            raise ProcessKillError(f"Could not kill {self.command}: {e}") from e
        finally:
            self._close_log()

    def _close_log(self) -> None:
        if self._log_file is not None:
            self._log_file.close()
            self._log_file = None

    def _read_log(self) -> str:
        if self.log_path is None or not self.log_path.exists():
            return ""
        try:
            return self.log_path.read_text(errors="replace").strip()
        except OSError:
            return ""


def spawn(
    command: str,
    args: List[str],
    log_path: Optional[Path] = None,
    **kwargs,
) -> ProcessHandle:
    """Build a ProcessHandle and execute it.

    Raises:
        LaunchError: If the process can't be started.
    """
    handle = ProcessHandle(command, args, log_path=log_path, **kwargs)
    handle.execute()
    return handle
