"""
screenrec - native screen recording behind a small session state machine.
"""

from .core import (
    Quality,
    Region,
    RecordingOptions,
    RecordingState,
    RecordingStatus,
)
from .factory import SessionFactory, get_session
from .session import RecordingSession

__version__ = "0.1.0"

__all__ = [
    "Quality",
    "Region",
    "RecordingOptions",
    "RecordingState",
    "RecordingStatus",
    "RecordingSession",
    "SessionFactory",
    "get_session",
]
