#!/usr/bin/env python
"""CLI for Whisper Diary."""

import argparse
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from whisper_diary import TranscriptMerger
from whisper_diary.core import WhisperDiaryError


def cmd_merge(args):
    """Merge a Whisper CSV with a Premiere CSV and write the outputs."""
    print(f"\nMerging: {args.whisper} + {args.premiere}")
    try:
        merger = TranscriptMerger.from_config(
            config_path=args.config, env=args.env, config_dir=args.config_dir
        )
        result = merger.merge_files(args.whisper, args.premiere)
        paths = merger.write(result, output_dir=args.output, stem=args.name)
    except (WhisperDiaryError, OSError, UnicodeDecodeError) as e:
        print(f"  ✗ Error: {e}")
        return 1
    
    print(f"  ✓ {result.segment_count} segments")
    for path in paths:
        print(f"    {path}")
    return 0


def cmd_serve(args):
    """Run the HTTP API."""
    import uvicorn
    
    from whisper_diary.api.app import create_app
    from whisper_diary.api.config import APIConfig
    from whisper_diary.config import load_config
    from whisper_diary.utils import setup_logging
    
    config = load_config(config_path=args.config, env=args.env, config_dir=args.config_dir)
    setup_logging(level=config.log_level, format_style="detailed")
    merger = TranscriptMerger(config)
    
    api_config = APIConfig(host=args.host, port=args.port)
    app = create_app(config=api_config, merger=merger)
    uvicorn.run(app, host=api_config.host, port=api_config.port)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Whisper Diary - speaker-attributed transcripts from Whisper and Premiere CSVs",
    )
    parser.add_argument("--env", "-e", default="development", help="Environment")
    parser.add_argument("--config-dir", "-c", default="configs", help="Config directory")
    parser.add_argument("--config", help="Extra config file")
    
    subparsers = parser.add_subparsers(dest="command", help="Commands")
    
    # Merge
    p = subparsers.add_parser("merge", help="Merge two CSV exports")
    p.add_argument("whisper", help="Whisper CSV (start, end, text)")
    p.add_argument("premiere", help="Premiere CSV (Speaker Name, Start Time, End Time, Text)")
    p.add_argument("--output", "-o", help="Output directory")
    p.add_argument("--name", "-n", help="Output filename stem (default: today's date)")
    p.set_defaults(func=cmd_merge)
    
    # Serve
    p = subparsers.add_parser("serve", help="Run the HTTP API")
    p.add_argument("--host", default="0.0.0.0", help="Bind address")
    p.add_argument("--port", "-p", type=int, default=8000, help="Port")
    p.set_defaults(func=cmd_serve)
    
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        return 0
    
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
