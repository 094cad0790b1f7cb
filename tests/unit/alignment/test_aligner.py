"""Tests for midpoint speaker alignment."""

import logging

from whisper_diary.alignment import resolve_speaker, align_segments
from whisper_diary.config import AlignmentConfig
from whisper_diary.core import AlignedSegment, Timecode, TimeMarker, TranscriptSegment


def marker(speaker, start, end):
    return TimeMarker(speaker=speaker, start=Timecode.parse(start), end=Timecode.parse(end))


class TestResolveSpeaker:
    def test_point_inside_interval(self):
        markers = [marker("Alice", "00:00:00:00", "00:00:05:00")]
        assert resolve_speaker(2000, markers) == "Alice"

    def test_end_boundary_is_inclusive(self):
        markers = [
            marker("Alice", "00;00;00;00", "00;00;05;00"),
            marker("Bob", "00;00;05;01", "00;00;09;00"),
        ]
        assert resolve_speaker(5000, markers) == "Alice"

    def test_start_boundary_is_inclusive(self):
        markers = [marker("Bob", "00;00;05;00", "00;00;09;00")]
        assert resolve_speaker(5000, markers) == "Bob"

    def test_first_listed_match_wins(self):
        markers = [
            marker("Alice", "00;00;00;00", "00;00;05;00"),
            marker("Bob", "00;00;05;00", "00;00;09;00"),
        ]
        assert resolve_speaker(5000, markers) == "Alice"

    def test_overlap_resolved_by_list_order_not_start_time(self):
        markers = [
            marker("Bob", "00;00;02;00", "00;00;09;00"),
            marker("Alice", "00;00;00;00", "00;00;05;00"),
        ]
        assert resolve_speaker(3000, markers) == "Bob"

    def test_gap_is_unknown(self):
        markers = [
            marker("Alice", "00;00;00;00", "00;00;02;00"),
            marker("Bob", "00;00;04;00", "00;00;06;00"),
        ]
        assert resolve_speaker(3000, markers) == "Unknown"

    def test_no_markers_is_unknown(self):
        assert resolve_speaker(3000, []) == "Unknown"

    def test_custom_unknown_label(self):
        assert resolve_speaker(3000, [], unknown="???") == "???"

    def test_frame_rate_changes_boundaries(self):
        # 12 frames: 400ms at 30fps, 500ms at 24fps
        markers = [marker("Alice", "00;00;00;00", "00;00;00;12")]
        assert resolve_speaker(450, markers, frame_rate=30) == "Unknown"
        assert resolve_speaker(450, markers, frame_rate=24) == "Alice"


class TestAlignSegments:
    def test_worked_example(self):
        segments = [TranscriptSegment(start=1000, end=3000, text="hello")]
        markers = [marker("Alice", "00:00:00:00", "00:00:05:00")]
        
        assert align_segments(segments, markers) == [
            AlignedSegment(speaker="Alice", start=1000, end=3000, text="hello")
        ]

    def test_uses_midpoint_not_start(self):
        # starts in Alice's interval, midpoint (4500) in Bob's
        segments = [TranscriptSegment(start=1000, end=8000, text="long")]
        markers = [
            marker("Alice", "00;00;00;00", "00;00;02;00"),
            marker("Bob", "00;00;03;00", "00;00;06;00"),
        ]
        assert align_segments(segments, markers)[0].speaker == "Bob"

    def test_fractional_midpoint(self):
        segments = [TranscriptSegment(start=1000, end=1001, text="blip")]
        markers = [marker("Alice", "00;00;00;00", "00;00;01;00")]
        # midpoint 1000.5 is past Alice's 1000ms end
        assert align_segments(segments, markers)[0].speaker == "Unknown"

    def test_order_and_timing_preserved(self):
        segments = [
            TranscriptSegment(start=5000, end=6000, text="b"),
            TranscriptSegment(start=0, end=1000, text="a"),
        ]
        aligned = align_segments(segments, [])
        assert [(s.start, s.end, s.text) for s in aligned] == [(5000, 6000, "b"), (0, 1000, "a")]

    def test_text_trimmed(self):
        segments = [TranscriptSegment(start=0, end=10, text="  padded \n")]
        assert align_segments(segments, [])[0].text == "padded"

    def test_empty_segments(self):
        assert align_segments([], [marker("Alice", "00;00;00;00", "00;00;01;00")]) == []

    def test_config_unknown_label(self):
        segments = [TranscriptSegment(start=0, end=10, text="x")]
        config = AlignmentConfig(unknown_speaker="Narrator")
        assert align_segments(segments, [], config)[0].speaker == "Narrator"

    def test_logs_attribution_ratio(self, caplog):
        segments = [
            TranscriptSegment(start=0, end=1000, text="a"),
            TranscriptSegment(start=9000, end=9500, text="b"),
        ]
        markers = [marker("Alice", "00;00;00;00", "00;00;05;00")]
        with caplog.at_level(logging.INFO):
            align_segments(segments, markers)
        assert "Aligned 1/2 segments" in caplog.text
