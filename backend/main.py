#!/usr/bin/env python3
"""Main entry point for imagevideo: split an N-D volume into frames."""

import argparse
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from imagevideo.app_orchestrator import AppOrchestrator
from imagevideo.domain.errors import ImageVideoError
from imagevideo.services.logging_service import LoggingService


def non_negative_int(value: str) -> int:
    """argparse type for frame counts."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Turn one axis of an N-D .npy volume into a frame sequence.")
    parser.add_argument("input", help="Input .npy or .npz volume")
    parser.add_argument("output_dir", help="Directory for frame images")
    parser.add_argument("--frame-axis", type=int, default=None, help="Axis used as time (default from config)")
    parser.add_argument("--video", default=None, help="Also write a video file with this name")
    parser.add_argument("--start", type=int, default=None, help="First frame index")
    parser.add_argument("--count", type=non_negative_int, default=None, help="Number of frames")
    parser.add_argument("--config-dir", default=None, help="Directory holding app.json")
    parser.add_argument("--verbose", action="store_true", help="Log per-frame detail")
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    config_dir = Path(args.config_dir) if args.config_dir else Path(__file__).parent.parent / "config"
    
    logger = LoggingService(level="DEBUG" if args.verbose else None)
    orchestrator = AppOrchestrator(config_dir, logger=logger)
    try:
        orchestrator.convert(
            args.input,
            args.output_dir,
            frame_axis=args.frame_axis,
            video_name=args.video,
            frame_start=args.start,
            frame_count=args.count,
        )
    except ImageVideoError as e:
        logger.error(f"[App] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
