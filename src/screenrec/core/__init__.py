"""
Core module - shared types, errors, and configuration.
"""

from .types import (
    Quality,
    Region,
    RecordingOptions,
    RecordingState,
    RecordingStatus,
)
from .errors import (
    RecorderError,
    InvalidStateError,
    LaunchError,
    NoActiveRecordingError,
    UnsupportedOperationError,
    UnknownPlatformError,
    BackendCallError,
    InvalidOptionsError,
    ProcessKillError,
)
from .config import (
    current_platform,
    get_app_data_dir,
    build_output_path,
    recording_timestamp,
)

__all__ = [
    # Types
    "Quality",
    "Region",
    "RecordingOptions",
    "RecordingState",
    "RecordingStatus",
    # Errors
    "RecorderError",
    "InvalidStateError",
    "LaunchError",
    "NoActiveRecordingError",
    "UnsupportedOperationError",
    "UnknownPlatformError",
    "BackendCallError",
    "InvalidOptionsError",
    "ProcessKillError",
    # Config
    "current_platform",
    "get_app_data_dir",
    "build_output_path",
    "recording_timestamp",
]
