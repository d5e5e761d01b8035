"""
Backends module - platform-specific capture strategies.

Provides a lookup function to select the strategy for a platform id.
"""

from .base import PlatformStrategy
from .invoker import CommandInvoker, PAUSE_COMMAND, RESUME_COMMAND
from .macos import MacStrategy
from .windows import WindowsStrategy
from ..core.errors import UnknownPlatformError


PLATFORM_ALIASES = {
    "mac": MacStrategy,
    "macos": MacStrategy,
    "darwin": MacStrategy,
    "osx": MacStrategy,
    "windows": WindowsStrategy,
    "win": WindowsStrategy,
    "win32": WindowsStrategy,
}


def get_strategy(platform_id: str) -> PlatformStrategy:
    """Select the capture strategy for a platform.

    Raises:
        UnknownPlatformError: If ``platform_id`` is empty or unrecognized.
    """
    if not platform_id or not platform_id.strip():
        raise UnknownPlatformError("Platform is required to create a recording session")

    strategy_cls = PLATFORM_ALIASES.get(platform_id.strip().lower())
    if strategy_cls is None:
        raise UnknownPlatformError(f"Unsupported platform: {platform_id}")
    return strategy_cls()


__all__ = [
    "PlatformStrategy",
    "CommandInvoker",
    "MacStrategy",
    "WindowsStrategy",
    "PAUSE_COMMAND",
    "RESUME_COMMAND",
    "PLATFORM_ALIASES",
    "get_strategy",
]
