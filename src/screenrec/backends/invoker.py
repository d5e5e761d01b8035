"""
Command invoker - named backend commands called by platform strategies.

Strategies never talk to the native layer directly for pause/resume; they
ask the invoker to run a named command (``platform-pause-recording``) and
whatever handler the host application registered does the work.
"""

import logging
from typing import Any, Callable, Dict

from ..core.errors import BackendCallError

logger = logging.getLogger(__name__)

PAUSE_COMMAND = "platform-pause-recording"
RESUME_COMMAND = "platform-resume-recording"


class CommandInvoker:
    """Registry of named backend commands."""

    def __init__(self):
        self._handlers: Dict[str, Callable[..., Any]] = {}

    def register(self, name: str, handler: Callable[..., Any]) -> None:
        """Register (or replace) the handler for a command name."""
        self._handlers[name] = handler

    def has_command(self, name: str) -> bool:
        return name in self._handlers

    def invoke(self, name: str, **kwargs) -> Any:
        """Run a named command.

        Raises:
            BackendCallError: If no handler is registered or the handler fails.
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise BackendCallError(f"No backend handler registered for '{name}'")

        logger.debug(f"Invoking backend command {name}")
        try:
            return handler(**kwargs)
        except BackendCallError:
            raise
        except Exception as e:
            raise BackendCallError(f"Backend command '{name}' failed: {e}") from e
