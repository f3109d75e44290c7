#!/usr/bin/env python3
"""
Border Scan Script
==================

Standalone script to detect borders of one or more image files.

This script:
    1. Scans every path given on the command line
    2. Prints one JSON report per image
    3. Exits non-zero if any image failed

Usage:
    python scripts/scan_image.py banner.png
    python scripts/scan_image.py anim.gif --frames 10 --size 512 --columns 50
    python scripts/scan_image.py photo.jpg --depth 0.3 --threshold 0.4 --no-deep
"""

import argparse
import json
import logging
import os
import random
import sys
import time

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from enimda import EnimdaError, detect_borders


# Configure logging
logging.basicConfig(
    level=os.environ.get("ENIMDA_LOG_LEVEL", "WARNING").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger(__name__)


def scan_path(path: str, args: argparse.Namespace, rng: random.Random) -> dict:
    """
    Scan a single image.
    
    Returns:
        Report dict with the path, borders and elapsed time, or an error
    """
    start_time = time.time()
    try:
        borders = detect_borders(
            path,
            frames=args.frames,
            size=args.size,
            columns=args.columns,
            depth=args.depth,
            threshold=args.threshold,
            deep=args.deep,
            rng=rng,
        )
    except (EnimdaError, OSError) as e:
        logger.error(f"Failed to scan {path}: {e}")
        return {"path": path, "error": str(e)}
    
    return {
        "path": path,
        "borders": borders.model_dump(),
        "elapsed_seconds": round(time.time() - start_time, 3),
    }


def main():
    parser = argparse.ArgumentParser(
        description="Detect uniform borders around image content"
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="Image files to scan",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="Frame limit for animated images (default: every frame)",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="Fit the image to this size before scanning (default: no resize)",
    )
    parser.add_argument(
        "--columns",
        type=int,
        default=None,
        help="Column limit per edge (default: every column)",
    )
    parser.add_argument(
        "--depth",
        type=float,
        default=0.25,
        help="Fraction of the image height searched per edge (default: 0.25)",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=0.5,
        help="Algorithm aggressiveness (default: 0.5)",
    )
    parser.add_argument(
        "--no-deep",
        dest="deep",
        action="store_false",
        help="Disable iterative border refinement",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for frame/column sampling",
    )
    
    args = parser.parse_args()
    rng = random.Random(args.seed)
    
    failures = 0
    for path in args.paths:
        report = scan_path(path, args, rng)
        if "error" in report:
            failures += 1
        print(json.dumps(report))
    
    # Exit with appropriate code
    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
