"""Segment-to-speaker alignment by midpoint attribution."""

from whisper_diary.config.schema import AlignmentConfig
from whisper_diary.core import (
    DEFAULT_FRAME_RATE,
    UNKNOWN_SPEAKER,
    AlignedSegment,
    TimeMarker,
    TranscriptSegment,
)
from whisper_diary.utils import get_logger

logger = get_logger(__name__)


def resolve_speaker(
    midpoint_ms: float,
    markers: list[TimeMarker],
    frame_rate: int = DEFAULT_FRAME_RATE,
    unknown: str = UNKNOWN_SPEAKER,
) -> str:
    """Find the speaker whose marker interval contains a point in time.
    
    Markers are scanned in the order they were parsed and the first
    interval containing the point wins. Both interval ends are inclusive.
    
    Args:
        midpoint_ms: Probe point in milliseconds
        markers: Speaker markers from the editor export
        frame_rate: Frames per second of the marker timecodes
        unknown: Label returned when no interval matches
        
    Returns:
        Speaker label
    """
    for marker in markers:
        start_ms = marker.start.to_ms(frame_rate)
        end_ms = marker.end.to_ms(frame_rate)
        if start_ms <= midpoint_ms <= end_ms:
            return marker.speaker
    
    return unknown


def align_segments(
    segments: list[TranscriptSegment],
    markers: list[TimeMarker],
    config: AlignmentConfig | None = None,
) -> list[AlignedSegment]:
    """Attribute each transcript segment to the speaker active at its midpoint.
    
    Segment order is preserved; nothing is sorted or merged.
    """
    config = config or AlignmentConfig()
    
    if not segments:
        return []
    
    if not markers:
        logger.warning(f"No speaker markers, segments will be labeled '{config.unknown_speaker}'")
    
    aligned = [
        AlignedSegment(
            speaker=resolve_speaker(
                seg.midpoint,
                markers,
                frame_rate=config.frame_rate,
                unknown=config.unknown_speaker,
            ),
            start=seg.start,
            end=seg.end,
            text=seg.text.strip(),
        )
        for seg in segments
    ]
    
    assigned = sum(1 for s in aligned if s.speaker != config.unknown_speaker)
    logger.info(f"Aligned {assigned}/{len(aligned)} segments to speakers")
    
    return aligned
