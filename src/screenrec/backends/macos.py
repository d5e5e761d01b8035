"""
macOS strategy - records with the built-in ``screencapture -v``.
"""

from pathlib import Path
from typing import List

from .base import PlatformStrategy
from ..core.types import Quality, RecordingOptions


class MacStrategy(PlatformStrategy):
    """screencapture in video mode. No pause/resume support."""

    platform_id = "macos"
    command_name = "screencapture"

    QUALITY_LEVELS = {
        Quality.HIGH: "100",
        Quality.MEDIUM: "75",
        Quality.LOW: "50",
    }

    def get_name(self) -> str:
        return "macOS (screencapture)"

    def build_args(self, options: RecordingOptions, output_path: Path) -> List[str]:
        args = ["-v"]

        if options.region is not None:
            args.extend(["-R", options.region.as_arg()])

        if options.enable_audio:
            args.append("-a")

        args.extend(["-q", self.QUALITY_LEVELS[options.quality]])

        args.append(str(output_path))
        return args
