"""Delimited-table rendering, one row per aligned segment."""

import csv
import io

from whisper_diary.core import DEFAULT_FRAME_RATE, AlignedSegment, BaseFormatter, ms_to_timecode
from whisper_diary.formatting.base import FormatterRegistry

TABLE_COLUMNS = ("speaker", "startTime", "endTime", "text")


def render_table(segments: list[AlignedSegment], frame_rate: int = DEFAULT_FRAME_RATE) -> str:
    """Render segments as fully quoted CSV with a header row.
    
    Start and end are re-encoded as ``HH;MM;SS;FF`` timecodes. No
    segments renders an empty string, header included.
    """
    if not segments:
        return ""
    
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(TABLE_COLUMNS)
    for seg in segments:
        writer.writerow([
            seg.speaker,
            ms_to_timecode(seg.start, frame_rate),
            ms_to_timecode(seg.end, frame_rate),
            seg.text,
        ])
    return buffer.getvalue()


@FormatterRegistry.register("csv")
class TableFormatter(BaseFormatter):
    """Lossless CSV export."""
    
    extension = ".csv"
    suffix = "-transcript"
    
    def __init__(self, frame_rate: int = DEFAULT_FRAME_RATE):
        self.frame_rate = frame_rate
    
    def render(self, segments: list[AlignedSegment]) -> str:
        return render_table(segments, self.frame_rate)
