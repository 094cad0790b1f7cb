"""Merge orchestration: parse, align, render."""

from datetime import date
from pathlib import Path

from whisper_diary.alignment import align_segments
from whisper_diary.config import WhisperDiaryConfig, load_config
from whisper_diary.core import MergeResult
from whisper_diary.core.exceptions import EmptyInputError, EmptyResultError
from whisper_diary.formatting import FormatterRegistry
from whisper_diary.parsing import parse_markers, parse_segments
from whisper_diary.utils import get_logger, logged, setup_logging, timed

logger = get_logger(__name__)


@timed
def merge_transcripts(
    whisper_text: str,
    premiere_text: str,
    config: WhisperDiaryConfig | None = None,
) -> MergeResult:
    """Merge a speech-to-text export with editor speaker markers.
    
    A pure function of its inputs: the same pair of texts always yields
    the same three outputs. Empty inputs are not checked here.
    
    Args:
        whisper_text: CSV with ``start``, ``end``, ``text`` columns
        premiere_text: CSV with ``Speaker Name``, ``Start Time``,
            ``End Time``, ``Text`` columns
        config: Parsing/alignment settings (defaults if omitted)
        
    Returns:
        MergeResult with the table and both Markdown renders
        
    Raises:
        ParseError: If either input cannot be parsed
    """
    config = config or WhisperDiaryConfig()
    frame_rate = config.alignment.frame_rate
    
    segments = parse_segments(whisper_text, config.parsing)
    markers = parse_markers(premiere_text, config.parsing)
    aligned = align_segments(segments, markers, config.alignment)
    
    outputs = {
        name: FormatterRegistry.create(name, frame_rate=frame_rate).render(aligned)
        for name in FormatterRegistry.list()
    }
    
    return MergeResult(
        csv=outputs["csv"],
        markdown_with_timestamps=outputs["markdown"],
        markdown_clean=outputs["markdown_clean"],
        segment_count=len(aligned),
    )


class TranscriptMerger:
    """Entry point used by the CLI and the HTTP API.
    
    Wraps ``merge_transcripts`` with the checks a caller owes it:
    blank inputs are rejected before parsing and a merge that renders
    nothing is reported instead of returned.
    
    Usage:
        merger = TranscriptMerger.from_config(env="development")
        result = merger.merge(whisper_text, premiere_text)
        merger.write(result, "./output")
    """
    
    def __init__(self, config: WhisperDiaryConfig | None = None):
        self.config = config or WhisperDiaryConfig()
    
    @classmethod
    def from_config(
        cls,
        config_path: Path | str | None = None,
        env: str | None = None,
        config_dir: Path | str = "configs",
    ) -> "TranscriptMerger":
        """Create a merger from configuration files and set up logging."""
        config = load_config(config_path=config_path, env=env, config_dir=config_dir)
        setup_logging(level=config.log_level)
        return cls(config)
    
    @logged
    def merge(self, whisper_text: str, premiere_text: str) -> MergeResult:
        """Merge two raw exports.
        
        Raises:
            EmptyInputError: If either text is blank
            ParseError: If either text cannot be parsed
            EmptyResultError: If nothing was left to render
        """
        if not whisper_text.strip() or not premiere_text.strip():
            raise EmptyInputError("Files appear to be empty")
        
        result = merge_transcripts(whisper_text, premiere_text, self.config)
        
        if result.is_empty:
            raise EmptyResultError("No valid segments were found to merge")
        
        return result
    
    def merge_files(self, whisper_path: Path | str, premiere_path: Path | str) -> MergeResult:
        """Read two UTF-8 files and merge them."""
        whisper_text = Path(whisper_path).read_text(encoding="utf-8")
        premiere_text = Path(premiere_path).read_text(encoding="utf-8")
        return self.merge(whisper_text, premiere_text)
    
    def write(
        self,
        result: MergeResult,
        output_dir: Path | str | None = None,
        stem: str | None = None,
    ) -> list[Path]:
        """Write the configured outputs to disk.
        
        Args:
            result: Merge result to write
            output_dir: Target directory (config's ``output_dir`` if omitted)
            stem: Filename stem (today's ISO date if omitted)
            
        Returns:
            Paths written, in format order
        """
        output_dir = Path(output_dir or self.config.output.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        stem = stem or default_stem()
        
        rendered = result.as_dict()
        paths = []
        for name in self.config.output.formats:
            formatter_cls = FormatterRegistry.get(name)
            path = output_dir / formatter_cls().filename(stem)
            path.write_text(rendered[name], encoding="utf-8")
            paths.append(path)
            logger.info(f"Wrote {name}: {path}")
        
        return paths


def default_stem() -> str:
    """Output filename stem: today's date, e.g. ``2024-05-01``."""
    return date.today().isoformat()
