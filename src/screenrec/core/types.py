"""
Core types - shared dataclasses used across the project.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .errors import InvalidOptionsError


class Quality(str, Enum):
    """Capture quality preset."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RecordingStatus(str, Enum):
    """Status of a recording session."""
    IDLE = "Idle"
    RECORDING = "Recording"
    PAUSED = "Paused"
    ERROR = "Error"


_TRUE_STRINGS = ("true", "1", "yes", "on")
_FALSE_STRINGS = ("false", "0", "no", "off")


def _parse_bool(value: Any, name: str) -> bool:
    """Accept real booleans and the usual JSON/form spellings of them."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise InvalidOptionsError(f"{name} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class Region:
    """Screen region to capture, in screen pixels."""
    x: int
    y: int
    width: int
    height: int

    def __post_init__(self):
        for name in ("x", "y", "width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidOptionsError(
                    f"Region {name} must be a non-negative integer, got {value!r}"
                )

    def as_arg(self) -> str:
        """Format as the 'x,y,width,height' string capture tools expect."""
        return f"{self.x},{self.y},{self.width},{self.height}"


@dataclass(frozen=True)
class RecordingOptions:
    """Options forwarded from the UI for one recording."""
    enable_audio: bool = True
    enable_video: bool = True
    frame_rate: int = 30
    quality: Quality = Quality.HIGH
    region: Optional[Region] = None

    def __post_init__(self):
        if isinstance(self.frame_rate, bool) or not isinstance(self.frame_rate, int) or self.frame_rate <= 0:
            raise InvalidOptionsError(
                f"frame_rate must be a positive integer, got {self.frame_rate!r}"
            )
        if not isinstance(self.quality, Quality):
            try:
                # Frozen dataclass: normalize plain strings through object.__setattr__
                object.__setattr__(self, "quality", Quality(str(self.quality).lower()))
            except ValueError:
                raise InvalidOptionsError(
                    f"quality must be one of high, medium, low; got {self.quality!r}"
                ) from None
        for name in ("enable_audio", "enable_video"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidOptionsError(
                    f"{name} must be a boolean, got {getattr(self, name)!r}"
                )
        if self.region is not None and not isinstance(self.region, Region):
            raise InvalidOptionsError(
                f"region must be an object with x, y, width and height; got {self.region!r}"
            )

    @classmethod
    def from_dict(cls, data: dict) -> "RecordingOptions":
        """Create RecordingOptions from the UI's JSON shape.

        Accepts the older front end's keys too: ``audio``, ``video`` and
        ``fps``.
        """
        region = data.get("region")
        if isinstance(region, dict):
            try:
                region = Region(
                    x=region["x"],
                    y=region["y"],
                    width=region["width"],
                    height=region["height"],
                )
            except KeyError as e:
                raise InvalidOptionsError(f"Region is missing field {e}") from None

        frame_rate = data.get("frame_rate", data.get("fps", 30))
        return cls(
            enable_audio=_parse_bool(data.get("enable_audio", data.get("audio", True)), "enable_audio"),
            enable_video=_parse_bool(data.get("enable_video", data.get("video", True)), "enable_video"),
            frame_rate=frame_rate,
            quality=data.get("quality", Quality.HIGH),
            region=region,
        )

    def to_dict(self) -> dict:
        """Convert options to a dictionary for JSON serialization."""
        return {
            "enable_audio": self.enable_audio,
            "enable_video": self.enable_video,
            "frame_rate": self.frame_rate,
            "quality": self.quality.value,
            "region": None if self.region is None else {
                "x": self.region.x,
                "y": self.region.y,
                "width": self.region.width,
                "height": self.region.height,
            },
        }


@dataclass(frozen=True)
class RecordingState:
    """Snapshot of a recording session's state."""
    status: RecordingStatus = RecordingStatus.IDLE
    duration_seconds: int = 0
    output_path: Optional[str] = None
    last_error: Optional[str] = None

    @property
    def is_recording(self) -> bool:
        """Check if a recording is live (recording or paused)."""
        return self.status in (RecordingStatus.RECORDING, RecordingStatus.PAUSED)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "is_recording": self.is_recording,
            "duration_seconds": self.duration_seconds,
            "output_path": self.output_path,
            "last_error": self.last_error,
        }
