"""
Session factory - binds a RecordingSession to the right platform strategy.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from .backends import CommandInvoker, get_strategy
from .core.config import COUNT_PAUSED_TIME, current_platform
from .process import spawn
from .session import RecordingSession
from .ticker import DurationTicker

logger = logging.getLogger(__name__)


class SessionFactory:
    """Creates sessions that share one configuration.

    ``reusable`` decides whether a session may start again after ``stop``
    (True) or must be discarded and recreated (False).

    Only macOS and Windows ids are supported. Anything else, including the
    "linux" id that ``current_platform()`` reports on Linux, raises
    ``UnknownPlatformError``. That is why ``server.session`` is None on Linux
    unless SCREENREC_PLATFORM forces a supported id.
    """

    def __init__(
        self,
        invoker: Optional[CommandInvoker] = None,
        spawner: Callable = spawn,
        data_dir: Optional[Path] = None,
        ticker_factory: Callable = DurationTicker,
        count_paused_time: bool = COUNT_PAUSED_TIME,
        reusable: bool = True,
    ):
        self.invoker = invoker
        self.spawner = spawner
        self.data_dir = data_dir
        self.ticker_factory = ticker_factory
        self.count_paused_time = count_paused_time
        self.reusable = reusable

    def create(self, platform_id: str) -> RecordingSession:
        """Create an idle session for ``platform_id``.

        Raises:
            UnknownPlatformError: If ``platform_id`` is empty or unrecognized.
        """
        strategy = get_strategy(platform_id)
        logger.info(f"Creating recording session for platform: {strategy.get_name()}")
        return RecordingSession(
            strategy,
            invoker=self.invoker,
            spawner=self.spawner,
            data_dir=self.data_dir,
            ticker_factory=self.ticker_factory,
            count_paused_time=self.count_paused_time,
            reusable=self.reusable,
        )


def get_session(platform_id: Optional[str] = None, **kwargs) -> RecordingSession:
    """Create a session for ``platform_id`` (default: the current platform)."""
    return SessionFactory(**kwargs).create(platform_id or current_platform())
