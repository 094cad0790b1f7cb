"""Speaker-grouped Markdown rendering."""

from dataclasses import dataclass, field
from functools import reduce

from whisper_diary.core import DEFAULT_FRAME_RATE, AlignedSegment, BaseFormatter, ms_to_timecode
from whisper_diary.formatting.base import FormatterRegistry


@dataclass
class SpeakerBlock:
    """A run of consecutive segments from the same speaker."""
    speaker: str
    segments: list[AlignedSegment] = field(default_factory=list)


_GroupState = tuple[list[SpeakerBlock], SpeakerBlock | None]


def _accumulate(state: _GroupState, segment: AlignedSegment) -> _GroupState:
    blocks, pending = state
    if pending is not None and pending.speaker == segment.speaker:
        pending.segments.append(segment)
        return blocks, pending
    if pending is not None:
        blocks.append(pending)
    return blocks, SpeakerBlock(segment.speaker, [segment])


def group_by_speaker(segments: list[AlignedSegment]) -> list[SpeakerBlock]:
    """Group adjacent segments that share a speaker.
    
    Only adjacency counts: a speaker who returns after someone else
    starts a new block. The pending block is flushed once the fold is
    exhausted.
    """
    blocks, pending = reduce(_accumulate, segments, ([], None))
    if pending is not None:
        blocks.append(pending)
    return blocks


def render_markdown(
    segments: list[AlignedSegment],
    include_timestamps: bool = True,
    frame_rate: int = DEFAULT_FRAME_RATE,
) -> str:
    """Render speaker blocks as Markdown.
    
    Each block is a bold speaker line, one line per segment
    (``[start - end] text`` when timestamps are requested), and a
    trailing blank line.
    """
    lines: list[str] = []
    for block in group_by_speaker(segments):
        lines.append(f"**{block.speaker}**\n")
        for seg in block.segments:
            if include_timestamps:
                start = ms_to_timecode(seg.start, frame_rate)
                end = ms_to_timecode(seg.end, frame_rate)
                lines.append(f"[{start} - {end}] {seg.text}\n")
            else:
                lines.append(f"{seg.text}\n")
        lines.append("\n")
    return "".join(lines)


@FormatterRegistry.register("markdown")
class MarkdownFormatter(BaseFormatter):
    """Grouped transcript with per-line timecodes."""
    
    extension = ".md"
    suffix = "-transcript-with-timestamps"
    include_timestamps = True
    
    def __init__(self, frame_rate: int = DEFAULT_FRAME_RATE):
        self.frame_rate = frame_rate
    
    def render(self, segments: list[AlignedSegment]) -> str:
        return render_markdown(segments, self.include_timestamps, self.frame_rate)


@FormatterRegistry.register("markdown_clean")
class CleanMarkdownFormatter(MarkdownFormatter):
    """Grouped transcript, text only."""
    
    suffix = "-transcript-clean"
    include_timestamps = False
