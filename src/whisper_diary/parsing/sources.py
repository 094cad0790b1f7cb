"""Readers for the speech-to-text and video editor exports."""

from whisper_diary.config.schema import ParsingConfig
from whisper_diary.core import TranscriptSegment, TimeMarker, Timecode
from whisper_diary.core.exceptions import ParseError, ParseReason
from whisper_diary.parsing.tabular import parse_table
from whisper_diary.utils import get_logger

logger = get_logger(__name__)


def parse_segments(text: str, config: ParsingConfig | None = None) -> list[TranscriptSegment]:
    """Parse the speech-to-text export (``start,end,text``).
    
    Parsing is strict: any quoting or column-count problem fails the
    whole file.
    """
    config = config or ParsingConfig()
    start_col, end_col, text_col = config.segment_columns
    
    records = parse_table(
        text,
        required=config.segment_columns,
        coerce=(start_col, end_col),
    )
    segments = [
        TranscriptSegment(start=r[start_col], end=r[end_col], text=r[text_col])
        for r in records
    ]
    logger.info(f"Parsed {len(segments)} transcript segments")
    return segments


def parse_markers(
    text: str,
    config: ParsingConfig | None = None,
) -> list[TimeMarker]:
    """Parse the editor's speaker marker export.
    
    With ``tolerant_markers`` set (the default), irregular quoting and
    ragged rows are accepted and rows with an empty field or an
    unreadable timecode are dropped with a warning.
    """
    config = config or ParsingConfig()
    speaker_col, start_col, end_col, text_col = config.marker_columns
    tolerant = config.tolerant_markers
    
    records = parse_table(text, tolerant=tolerant, required=config.marker_columns)
    
    markers: list[TimeMarker] = []
    for index, r in enumerate(records, 1):
        try:
            start = Timecode.parse(r[start_col])
            end = Timecode.parse(r[end_col])
        except ValueError as e:
            if not tolerant:
                raise ParseError(str(e), ParseReason.VALUE) from e
            logger.warning(f"Dropping marker {index} ({r[speaker_col]}): {e}")
            continue
        markers.append(TimeMarker(speaker=r[speaker_col], start=start, end=end, text=r[text_col]))
    
    logger.info(f"Parsed {len(markers)} speaker markers")
    return markers
