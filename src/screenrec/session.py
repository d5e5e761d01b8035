"""
Recording session - the state machine around one native capture process.

    Idle -> Recording -> (Paused <-> Recording) -> Idle
    Error on a failed launch or backend call; stop() always lands on Idle.

Every state change and every ticker tick runs under one lock, so callers never
see a half-applied status (e.g. Recording without a process). Launching and
killing the tool block for a while, so they run outside the lock: the state
is committed before a kill and after a launch.
"""

import logging
import threading
from functools import partial
from pathlib import Path
from typing import Callable, Optional, Union

from .backends.base import PlatformStrategy
from .backends.invoker import CommandInvoker
from .core.config import COUNT_PAUSED_TIME, build_output_path, get_app_data_dir
from .core.errors import (
    BackendCallError,
    InvalidStateError,
    LaunchError,
    NoActiveRecordingError,
    RecorderError,
    UnsupportedOperationError,
)
from .core.types import RecordingOptions, RecordingState, RecordingStatus
from .process import spawn
from .ticker import DurationTicker

logger = logging.getLogger(__name__)


class RecordingSession:
    """Start/stop/pause/resume one recording at a time on one platform.

    Args:
        strategy: Platform strategy that builds the capture invocation.
        invoker: Backend command invoker used for pause/resume.
        spawner: ``spawner(command, args, log_path=...)`` returning a
            started process handle with a ``kill()`` method.
        data_dir: Where recordings go; defaults to the app data dir.
        ticker_factory: ``ticker_factory(callback)`` returning an object
            with ``start()``/``stop()``.
        count_paused_time: Keep counting duration while paused.
        reusable: Allow another ``start`` after ``stop``.
    """

    def __init__(
        self,
        strategy: PlatformStrategy,
        invoker: Optional[CommandInvoker] = None,
        spawner: Callable = spawn,
        data_dir: Optional[Path] = None,
        ticker_factory: Callable = DurationTicker,
        count_paused_time: bool = COUNT_PAUSED_TIME,
        reusable: bool = True,
    ):
        self.strategy = strategy
        self.invoker = invoker if invoker is not None else CommandInvoker()
        self.count_paused_time = count_paused_time
        self.reusable = reusable
        self._spawner = spawner
        self._data_dir = data_dir
        self._ticker_factory = ticker_factory

        self._lock = threading.RLock()
        self._status = RecordingStatus.IDLE
        self._duration = 0
        self._output_path: Optional[Path] = None
        self._last_error: Optional[str] = None
        self._process = None
        self._ticker = None
        self._generation = 0
        self._completed = False
        self._starting = False

    @property
    def platform_id(self) -> str:
        return self.strategy.platform_id

    def start(self, options: Union[RecordingOptions, dict]) -> None:
        """Launch the capture tool and begin counting duration.

        The lock is released while the tool launches, so ``get_state`` keeps
        answering during the startup grace period. A second ``start`` in that
        window is rejected.

        Raises:
            InvalidStateError: If a recording is live or starting, or this
                single-use session already recorded once.
            LaunchError: If the options are rejected or the process fails
                to start. The session is left in Error with no process.
        """
        with self._lock:
            if self._starting:
                raise InvalidStateError("Recording is already starting")
            if self._status in (RecordingStatus.RECORDING, RecordingStatus.PAUSED):
                raise InvalidStateError("Recording is already in progress")
            if self._completed and not self.reusable:
                raise InvalidStateError("Session already finished; create a new one")

            # Error after a failed pause/resume still owns a live process
            stale = self._detach_process()

            failure = None
            try:
                if isinstance(options, dict):
                    options = RecordingOptions.from_dict(options)
                output_path = build_output_path(get_app_data_dir(self._data_dir))
                command, args = self.strategy.build_invocation(options, output_path)
            except (RecorderError, OSError) as e:
                failure = e
                self._fail(f"Failed to start recording: {e}")
            else:
                self._starting = True

        self._kill_quietly(stale)
        if failure is not None:
            raise LaunchError(f"Failed to start recording: {failure}") from failure

        try:
            logger.info(f"Starting {command} {' '.join(args)}")
            process = self._spawner(command, args, log_path=output_path.with_suffix(".log"))
        except LaunchError as e:
            with self._lock:
                self._starting = False
                self._fail(str(e))
            raise
        except (RecorderError, OSError) as e:
            message = f"Failed to start recording: {e}"
            with self._lock:
                self._starting = False
                self._fail(message)
            raise LaunchError(message) from e
        except BaseException:
            with self._lock:
                self._starting = False
            raise

        with self._lock:
            self._starting = False
            self._generation += 1
            self._process = process
            self._output_path = output_path
            self._duration = 0
            self._last_error = None
            self._status = RecordingStatus.RECORDING

            self._ticker = self._ticker_factory(partial(self._on_tick, self._generation))
            self._ticker.start()
            logger.info(f"Recording to {output_path}")

    def stop(self) -> str:
        """Kill the capture tool and return the output path.

        Always leaves the session Idle. A failure to kill is logged and kept
        in ``last_error``; it is not raised. The kill runs outside the lock.

        Raises:
            NoActiveRecordingError: If there is no process to stop.
        """
        with self._lock:
            process = self._detach_process()
            self._status = RecordingStatus.IDLE

            if process is None:
                raise NoActiveRecordingError("No recording in progress")

            output_path = self._output_path
            self._completed = True

        error = self._kill_quietly(process)
        if error is not None:
            with self._lock:
                self._last_error = error
        else:
            self._cleanup_log(output_path)

        logger.info(f"Recording stopped, saved to: {output_path}")
        return str(output_path)

    def pause(self) -> None:
        """Pause through the platform's backend command.

        Raises:
            UnsupportedOperationError: If the platform can't pause.
            NoActiveRecordingError: If nothing is recording.
            InvalidStateError: If the recording isn't in Recording status.
            BackendCallError: If the backend command fails (session -> Error).
        """
        with self._lock:
            self._check_transition(RecordingStatus.RECORDING, "pause")
            try:
                self.strategy.pause(self.invoker)
            except BackendCallError as e:
                self._set_error(f"Failed to pause recording: {e}")
                raise
            self._status = RecordingStatus.PAUSED
            logger.info("Recording paused")

    def resume(self) -> None:
        """Resume a paused recording; errors mirror :meth:`pause`."""
        with self._lock:
            self._check_transition(RecordingStatus.PAUSED, "resume")
            try:
                self.strategy.resume(self.invoker)
            except BackendCallError as e:
                self._set_error(f"Failed to resume recording: {e}")
                raise
            self._status = RecordingStatus.RECORDING
            logger.info("Recording resumed")

    def get_state(self) -> RecordingState:
        """Snapshot of the current state."""
        with self._lock:
            return RecordingState(
                status=self._status,
                duration_seconds=self._duration,
                output_path=str(self._output_path) if self._output_path else None,
                last_error=self._last_error,
            )

    def close(self) -> None:
        """Stop a live recording, if any."""
        with self._lock:
            live = self._process is not None
        if live:
            try:
                self.stop()
            except NoActiveRecordingError:
                # Stopped by another caller in between
                pass

    def _check_transition(self, required: RecordingStatus, action: str) -> None:
        if not self.strategy.supports_pause():
            raise UnsupportedOperationError(
                f"Pause/resume not supported on {self.strategy.get_name()}"
            )
        if self._process is None:
            raise NoActiveRecordingError("No recording in progress")
        if self._status is not required:
            raise InvalidStateError(f"Cannot {action} while {self._status.value}")

    def _on_tick(self, generation: int) -> None:
        with self._lock:
            # Late tick from an earlier recording
            if generation != self._generation or self._process is None:
                return
            if self._status is RecordingStatus.RECORDING or (
                self._status is RecordingStatus.PAUSED and self.count_paused_time
            ):
                self._duration += 1
                logger.debug(f"Recording duration: {self._duration}s")

    def _detach_process(self):
        """Take the process and ticker out of the session; caller holds the lock."""
        self._stop_ticker()
        process = self._process
        self._process = None
        self._duration = 0
        return process

    def _kill_quietly(self, process) -> Optional[str]:
        """Kill ``process`` outside the lock; return the error message, if any."""
        if process is None:
            return None
        try:
            process.kill()
        except Exception as e:
            logger.warning(f"Could not kill capture process: {e}")
            return str(e) or type(e).__name__
        return None

    def _stop_ticker(self) -> None:
        if self._ticker is not None:
            self._ticker.stop()
            self._ticker = None

    def _fail(self, message: str) -> None:
        self._stop_ticker()
        self._process = None
        self._duration = 0
        self._set_error(message)

    def _set_error(self, message: str) -> None:
        logger.error(message)
        self._status = RecordingStatus.ERROR
        self._last_error = message

    def _cleanup_log(self, output_path: Optional[Path]) -> None:
        # Only drop the tool's log once it produced a non-empty recording
        if output_path is None:
            return
        log_path = output_path.with_suffix(".log")
        try:
            if log_path.exists() and output_path.exists() and output_path.stat().st_size > 0:
                log_path.unlink()
        except OSError as e:
            logger.debug(f"Could not remove {log_path}: {e}")
