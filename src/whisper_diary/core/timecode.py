"""Frame-based timecodes (HH;MM;SS;FF) and millisecond conversion."""

import math
import re
from dataclasses import dataclass

DEFAULT_FRAME_RATE = 30

_SEPARATOR_RE = re.compile(r"[:;]")


@dataclass(frozen=True)
class Timecode:
    """A four-component editor timecode.
    
    Frames are not range-checked: a frame value past the frame rate still
    converts, just skewed.
    """
    hours: int
    minutes: int
    seconds: int
    frames: int
    
    @classmethod
    def parse(cls, value: str) -> "Timecode":
        """Parse ``HH;MM;SS;FF`` (``:`` is accepted as separator too).
        
        Raises:
            ValueError: If the value is not four integer components
        """
        parts = _SEPARATOR_RE.split(value.strip())
        if len(parts) != 4:
            raise ValueError(f"Expected 4 timecode components, got {len(parts)}: {value!r}")
        try:
            hours, minutes, seconds, frames = (int(p) for p in parts)
        except ValueError:
            raise ValueError(f"Non-numeric timecode: {value!r}") from None
        return cls(hours, minutes, seconds, frames)
    
    @classmethod
    def from_ms(cls, ms: float, frame_rate: int = DEFAULT_FRAME_RATE) -> "Timecode":
        """Build a timecode from absolute milliseconds, flooring each unit."""
        return cls(
            hours=math.floor(ms / 3_600_000),
            minutes=math.floor((ms % 3_600_000) / 60_000),
            seconds=math.floor((ms % 60_000) / 1000),
            frames=math.floor((ms % 1000) * frame_rate / 1000),
        )
    
    def to_ms(self, frame_rate: int = DEFAULT_FRAME_RATE) -> int:
        """Absolute milliseconds at the given frame rate."""
        return (
            self.hours * 3_600_000
            + self.minutes * 60_000
            + self.seconds * 1000
            + math.floor(self.frames * 1000 / frame_rate)
        )
    
    def __str__(self) -> str:
        return f"{self.hours:02d};{self.minutes:02d};{self.seconds:02d};{self.frames:02d}"


def timecode_to_ms(value: str, frame_rate: int = DEFAULT_FRAME_RATE) -> int:
    """Convert a timecode string to milliseconds."""
    return Timecode.parse(value).to_ms(frame_rate)


def ms_to_timecode(ms: float, frame_rate: int = DEFAULT_FRAME_RATE) -> str:
    """Convert milliseconds to a ``HH;MM;SS;FF`` string."""
    return str(Timecode.from_ms(ms, frame_rate))
