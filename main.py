"""
Main entry point for the player tracking and re-identification demo.

Usage:
    python main.py

Or with custom settings:
    python main.py --frames 900 --seed 7 --matching hungarian
"""

import argparse
import sys

from loguru import logger

from player_reid import SessionProcessor, SimulationConfig, TrackingConfig


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Multi-player tracking with re-identification (simulated detections)"
    )

    parser.add_argument(
        "--frames", type=int, default=300,
        help="Number of frames to simulate"
    )
    parser.add_argument(
        "--fps", type=float, default=30.0,
        help="Simulated frame rate"
    )
    parser.add_argument(
        "--width", type=int, default=1280,
        help="Frame width in pixels"
    )
    parser.add_argument(
        "--height", type=int, default=720,
        help="Frame height in pixels"
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed for the simulated detector"
    )
    parser.add_argument(
        "--max-distance", type=float, default=100.0,
        help="Maximum distance for frame-to-frame matching"
    )
    parser.add_argument(
        "--reid-threshold", type=float, default=0.7,
        help="Minimum appearance similarity for re-identification"
    )
    parser.add_argument(
        "--max-missed", type=int, default=30,
        help="Missed frames tolerated before a player is removed"
    )
    parser.add_argument(
        "--matching", choices=["greedy", "hungarian"], default="greedy",
        help="Frame-to-frame assignment strategy"
    )
    parser.add_argument(
        "--progress-every", type=int, default=60,
        help="Print progress every N frames (0 to disable)"
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Show tracker debug logging"
    )

    return parser.parse_args()


def main():
    """Main execution function."""
    args = parse_args()

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    # Create configuration
    tracking_config = TrackingConfig(
        max_distance=args.max_distance,
        reidentification_threshold=args.reid_threshold,
        max_frames_before_removal=args.max_missed,
        matching=args.matching,
    )
    simulation_config = SimulationConfig(
        width=args.width,
        height=args.height,
        fps=args.fps,
        frame_count=args.frames,
        seed=args.seed,
        progress_every=args.progress_every,
    )

    print("=" * 70)
    print("MULTI-PLAYER TRACKING - RE-IDENTIFICATION")
    print("=" * 70)
    print(f"Frames: {simulation_config.frame_count} "
          f"({simulation_config.duration:.1f}s @ {simulation_config.fps:.1f} fps)")
    print(f"Matching: {tracking_config.matching}, "
          f"max distance {tracking_config.max_distance:.0f}")
    print(f"Re-id threshold: {tracking_config.reidentification_threshold:.2f}")
    print(f"Removal after: {tracking_config.max_frames_before_removal} missed frames")
    print("=" * 70 + "\n")

    processor = SessionProcessor(tracking_config, simulation_config)

    try:
        processor.process()
    except Exception as e:
        print(f"\n❌ Error: {e}")
        raise

    print("\n✅ Processing completed successfully!")


if __name__ == "__main__":
    main()
