"""Data classes shared by the parser, aligner and formatters."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from whisper_diary.core.timecode import Timecode

UNKNOWN_SPEAKER = "Unknown"


@dataclass
class TranscriptSegment:
    """One transcribed utterance from the speech-to-text export."""
    start: float  # producer-defined duration unit, treated as ms
    end: float
    text: str
    
    @property
    def midpoint(self) -> float:
        return self.start + (self.end - self.start) / 2


@dataclass
class TimeMarker:
    """A speaker-labeled interval from the video editor export."""
    speaker: str
    start: Timecode
    end: Timecode
    text: str = ""


@dataclass
class AlignedSegment:
    """A transcript segment attributed to a speaker."""
    speaker: str
    start: float
    end: float
    text: str


@dataclass(frozen=True)
class MergeResult:
    """The three rendered outputs of one merge."""
    csv: str
    markdown_with_timestamps: str
    markdown_clean: str
    segment_count: int = 0
    
    @property
    def is_empty(self) -> bool:
        """True when the table render holds nothing to download."""
        return not self.csv.strip()
    
    def as_dict(self) -> dict[str, str]:
        """Outputs keyed by formatter name."""
        return {
            "csv": self.csv,
            "markdown": self.markdown_with_timestamps,
            "markdown_clean": self.markdown_clean,
        }


class BaseFormatter(ABC):
    """Abstract base class for transcript renderers."""
    
    #: File extension used when the output is written to disk.
    extension: str = ".txt"
    #: Appended to the filename stem to tell variants apart.
    suffix: str = ""
    
    @abstractmethod
    def render(self, segments: list[AlignedSegment]) -> str:
        """Render aligned segments to a string."""
        pass
    
    def filename(self, stem: str) -> str:
        """Output filename for a given stem."""
        return f"{stem}{self.suffix}{self.extension}"
