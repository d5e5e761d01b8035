"""
Windows strategy - launches the Xbox Game Bar recorder through PowerShell.

Pause and resume are not process signals here; they go to the named
backend commands ``platform-pause-recording`` / ``platform-resume-recording``.
"""

from pathlib import Path
from typing import List

from .base import PlatformStrategy
from .invoker import CommandInvoker, PAUSE_COMMAND, RESUME_COMMAND
from ..core.types import RecordingOptions


GAME_BAR_APP = r'"shell:AppsFolder\Microsoft.XboxGameBar_8wekyb3d8bbwe!App"'


class WindowsStrategy(PlatformStrategy):
    """PowerShell ``Start-Process`` of the Game Bar capture helper."""

    platform_id = "windows"
    command_name = "powershell"

    def get_name(self) -> str:
        return "Windows (Game Bar)"

    def build_args(self, options: RecordingOptions, output_path: Path) -> List[str]:
        args = [
            "-Command",
            "Start-Process",
            GAME_BAR_APP,
            "-ArgumentList",
            '"--record"',
        ]

        if options.region is not None:
            args.extend(["--region", options.region.as_arg()])

        if options.enable_audio:
            args.append("--audio")

        args.extend(["--quality", options.quality.value])
        args.extend(["--output", str(output_path)])
        return args

    def supports_pause(self) -> bool:
        return True

    def pause(self, invoker: CommandInvoker) -> None:
        invoker.invoke(PAUSE_COMMAND)

    def resume(self, invoker: CommandInvoker) -> None:
        invoker.invoke(RESUME_COMMAND)
