"""
Platform strategy base - the contract every per-OS strategy satisfies.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Tuple

from .invoker import CommandInvoker
from ..core.errors import UnsupportedOperationError
from ..core.types import RecordingOptions


class PlatformStrategy(ABC):
    """Turns RecordingOptions into a concrete capture-tool invocation."""

    platform_id: str = ""
    command_name: str = ""

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name, e.g. 'macOS (screencapture)'."""
        pass

    @abstractmethod
    def build_args(self, options: RecordingOptions, output_path: Path) -> List[str]:
        """Argument list for the capture tool, output path included."""
        pass

    def build_invocation(self, options: RecordingOptions, output_path: Path) -> Tuple[str, List[str]]:
        """Get the (command_name, argument_list) pair to spawn."""
        return self.command_name, self.build_args(options, output_path)

    def supports_pause(self) -> bool:
        return False

    def pause(self, invoker: CommandInvoker) -> None:
        raise UnsupportedOperationError(f"Pause/resume not supported on {self.get_name()}")

    def resume(self, invoker: CommandInvoker) -> None:
        raise UnsupportedOperationError(f"Pause/resume not supported on {self.get_name()}")
