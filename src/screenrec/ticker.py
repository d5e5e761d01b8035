"""
Duration ticker - 1 Hz timer that drives elapsed-time accounting.
"""

import logging
import threading
from typing import Callable, Optional

from .core.config import TICK_INTERVAL_SECONDS

logger = logging.getLogger(__name__)


class DurationTicker:
    """Calls ``callback`` once per ``interval`` seconds on a daemon thread.

    ``start`` and ``stop`` are idempotent. ``stop`` does not join the
    thread: the callback may be waiting on a lock the caller holds.
    """

    def __init__(self, callback: Callable[[], None], interval: float = TICK_INTERVAL_SECONDS):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._callback = callback
        self.interval = interval
        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None

    def is_running(self) -> bool:
        return self._stop_event is not None and not self._stop_event.is_set()

    def start(self) -> None:
        if self.is_running():
            return
        stop_event = threading.Event()
        self._stop_event = stop_event
        self._thread = threading.Thread(
            target=self._run,
            args=(stop_event,),
            name="duration-ticker",
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        if self._stop_event is not None:
            self._stop_event.set()
        self._stop_event = None
        self._thread = None

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.interval):
            try:
                self._callback()
            except Exception:
                logger.exception("Duration ticker callback failed; ticker stopped")
                stop_event.set()
                return
