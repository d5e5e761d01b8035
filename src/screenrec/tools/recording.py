"""
Recording tools - start, stop, pause, resume, and state for screen recording.
"""

import asyncio
import json
from typing import Optional

from ..core.config import current_platform
from ..core.errors import InvalidOptionsError, RecorderError
from ..core.types import RecordingOptions, Region


def _unsupported_message() -> str:
    return (
        f"ERROR: Recording is not supported on platform '{current_platform()}'.\n\n"
        "Supported platforms: macOS (screencapture), Windows (Game Bar).\n"
        "Set SCREENREC_PLATFORM to force one."
    )


def build_options(
    audio: bool = True,
    video: bool = True,
    frame_rate: int = 30,
    quality: str = "high",
    x: Optional[int] = None,
    y: Optional[int] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> RecordingOptions:
    """Turn flat tool arguments into RecordingOptions.

    Raises:
        InvalidOptionsError: If the region is partial or a value is invalid.
    """
    coords = (x, y, width, height)
    region = None
    if any(c is not None for c in coords):
        if any(c is None for c in coords):
            raise InvalidOptionsError("Region needs all of x, y, width and height")
        region = Region(x=x, y=y, width=width, height=height)

    return RecordingOptions(
        enable_audio=audio,
        enable_video=video,
        frame_rate=frame_rate,
        quality=quality,
        region=region,
    )


def register_recording_tools(mcp, session):
    """Register recording tools with the MCP server.

    Args:
        mcp: FastMCP server instance.
        session: RecordingSession, or None when the platform is unsupported.
    """

    @mcp.tool(description="Get the platform id recordings run on (e.g. 'macos', 'windows').")
    async def get_platform() -> str:
        """Get the current platform."""
        if session is None:
            return current_platform()
        return session.platform_id

    @mcp.tool(description="Start screen recording. Optional region as x, y, width, height. Quality: high, medium, low.")
    async def start_recording(
        audio: bool = True,
        video: bool = True,
        frame_rate: int = 30,
        quality: str = "high",
        x: int = None,
        y: int = None,
        width: int = None,
        height: int = None,
    ) -> str:
        """Start screen recording.

        Args:
            audio: Capture audio along with the screen.
            video: Capture video.
            frame_rate: Frames per second.
            quality: One of 'high', 'medium', 'low'.
            x, y, width, height: Region to capture. All four or none.
        """
        if session is None:
            return _unsupported_message()

        try:
            options = build_options(audio, video, frame_rate, quality, x, y, width, height)
            await asyncio.to_thread(session.start, options)
        except RecorderError as e:
            return f"Recording failed: {e}"

        state = session.get_state()
        region_info = f"Region: {options.region.as_arg()}\n" if options.region else ""
        return (
            f"Recording started!\n"
            f"Platform: {session.strategy.get_name()}\n"
            f"Output: {state.output_path}\n"
            f"{region_info}"
            f"Quality: {options.quality.value}\n\n"
            f"Use 'stop_recording' when done."
        )

    @mcp.tool(description="Stop the current recording and return the saved video path.")
    async def stop_recording() -> str:
        """Stop screen recording."""
        if session is None:
            return _unsupported_message()

        duration = session.get_state().duration_seconds
        try:
            output_path = await asyncio.to_thread(session.stop)
        except RecorderError as e:
            return str(e)

        state = session.get_state()
        warning = f"Warning: {state.last_error}\n" if state.last_error else ""
        return (
            f"Recording stopped!\n"
            f"Output: {output_path}\n"
            f"{warning}"
            f"Duration: {duration} seconds"
        )

    @mcp.tool(description="Pause the current recording (Windows only).")
    async def pause_recording() -> str:
        """Pause screen recording."""
        if session is None:
            return _unsupported_message()
        try:
            await asyncio.to_thread(session.pause)
        except RecorderError as e:
            return f"Pause failed: {e}"
        return "Recording paused."

    @mcp.tool(description="Resume a paused recording (Windows only).")
    async def resume_recording() -> str:
        """Resume screen recording."""
        if session is None:
            return _unsupported_message()
        try:
            await asyncio.to_thread(session.resume)
        except RecorderError as e:
            return f"Resume failed: {e}"
        return "Recording resumed."

    @mcp.tool(description="Get recording state as JSON: status, duration_seconds, output_path, last_error.")
    async def get_recording_state() -> str:
        """Get the recording state."""
        if session is None:
            return json.dumps({
                "status": "Idle",
                "is_recording": False,
                "duration_seconds": 0,
                "output_path": None,
                "last_error": _unsupported_message(),
            })
        return json.dumps(session.get_state().to_dict())
