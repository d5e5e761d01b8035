"""
Core configuration - environment detection, paths, and constants.
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


APP_NAME = "screenrec"

# Environment variables for configuration
DATA_DIR_OVERRIDE = os.environ.get("SCREENREC_DATA_DIR")
PLATFORM_OVERRIDE = os.environ.get("SCREENREC_PLATFORM")
STARTUP_GRACE_SECONDS = float(os.environ.get("SCREENREC_STARTUP_GRACE", 0.5))
KILL_TIMEOUT_SECONDS = float(os.environ.get("SCREENREC_KILL_TIMEOUT", 3.0))
TICK_INTERVAL_SECONDS = float(os.environ.get("SCREENREC_TICK_INTERVAL", 1.0))
COUNT_PAUSED_TIME = os.environ.get("SCREENREC_COUNT_PAUSED_TIME", "").lower() in ("1", "true", "yes")


def current_platform() -> str:
    """Get the current platform identifier.

    ``SCREENREC_PLATFORM`` wins over detection so a UI can force a strategy.
    """
    if PLATFORM_OVERRIDE:
        return PLATFORM_OVERRIDE
    if sys.platform == "darwin":
        return "macos"
    elif sys.platform.startswith("linux"):
        return "linux"
    elif sys.platform == "win32":
        return "windows"
    else:
        return sys.platform


def default_app_data_dir(platform: Optional[str] = None) -> Path:
    """Per-platform application data directory (not created)."""
    platform = platform or sys.platform
    home = Path(os.path.expanduser("~"))

    if platform == "darwin":
        return home / "Library" / "Application Support" / APP_NAME
    elif platform == "win32":
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else home / "AppData" / "Roaming"
        return base / APP_NAME
    else:
        xdg = os.environ.get("XDG_DATA_HOME")
        base = Path(xdg) if xdg else home / ".local" / "share"
        return base / APP_NAME


def get_app_data_dir(override: Optional[Path] = None) -> Path:
    """Get the directory recordings are written to.

    Returns:
        ``override`` if given, else ``SCREENREC_DATA_DIR``, else the
        platform default. The directory is created if missing.
    """
    if override is not None:
        data_dir = Path(override)
    elif DATA_DIR_OVERRIDE:
        data_dir = Path(os.path.expanduser(DATA_DIR_OVERRIDE))
    else:
        data_dir = default_app_data_dir()

    # Ensure directory exists
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def recording_timestamp(now: Optional[datetime] = None) -> str:
    """ISO 8601 UTC timestamp with ':' and '.' replaced by '-'.

    Matches JavaScript's ``toISOString()`` shape, millisecond precision with
    a trailing ``Z``: ``2024-05-01T10-20-30-123Z``.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    iso = now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
    return iso.replace(":", "-").replace(".", "-")


def build_output_path(data_dir: Path, now: Optional[datetime] = None) -> Path:
    """Join the data dir with ``recording-<timestamp>.mp4``."""
    return Path(data_dir) / f"recording-{recording_timestamp(now)}.mp4"
