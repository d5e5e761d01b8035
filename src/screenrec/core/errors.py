"""
Core errors - exception hierarchy for recording sessions.
"""


class RecorderError(Exception):
    """Base exception for recorder errors."""
    pass


class InvalidStateError(RecorderError):
    """Operation is not valid in the session's current status."""
    pass


class LaunchError(RecorderError):
    """The capture process (or its invocation) failed to start."""
    pass


class NoActiveRecordingError(RecorderError):
    """Stop/pause/resume was requested with nothing running."""
    pass


class UnsupportedOperationError(RecorderError):
    """The platform strategy does not support the operation."""
    pass


class UnknownPlatformError(RecorderError):
    """No strategy exists for the given platform identifier."""
    pass


class BackendCallError(RecorderError):
    """A named backend command failed."""
    pass


class InvalidOptionsError(RecorderError, ValueError):
    """Recording options failed validation."""
    pass


class ProcessKillError(RecorderError):
    """The capture process could not be terminated."""
    pass
