"""
Command-Line Driver
===================
Loads a point set, computes its convex hull and prints the hull vertices.

Usage:
    $ python -m minboundinggeo points.csv
    $ python -m minboundinggeo points.npy -o hull.csv -v
"""
import argparse
import logging
import os
from typing import Optional, Sequence

from minboundinggeo.algorithms.graham_scan import GrahamScan
from minboundinggeo.config import LOG_LEVEL_ENV, SAMPLE_POINTS_PATH
from minboundinggeo.logging_config import setup_logging
from minboundinggeo.model.io import PointIO

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minboundinggeo",
        description="Compute the 2D convex hull of a point set (z is carried but ignored).",
    )
    parser.add_argument(
        "points_file",
        nargs="?",
        default=SAMPLE_POINTS_PATH,
        help="CSV/TXT (x,y[,z] rows) or NPY file with the input points. Defaults to the bundled sample.",
    )
    parser.add_argument("-o", "--output", help="Write the hull to this CSV/TXT/NPY file instead of stdout.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-file", help="Also write logs to this file.")
    return parser


def _log_level(verbose: bool) -> int:
    if verbose:
        return logging.DEBUG
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.WARNING


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=_log_level(args.verbose), log_file=args.log_file)

    # 2. Load the point set
    try:
        points = PointIO.load_points(args.points_file)
    except (OSError, ValueError) as e:
        logger.error(f"Could not read points: {e}")
        return 1

    # 3. Compute the hull
    scan = GrahamScan(points)
    logger.info(f"{len(scan)} hull points out of {len(scan.points_raw)}.")

    # 4. Report
    if args.output:
        try:
            PointIO.save_points(scan.edge_points, args.output)
        except (OSError, ValueError) as e:
            logger.error(f"Could not write hull: {e}")
            return 1
    else:
        print(f"{len(scan)} points.")
        for p in scan:
            print(f"{p.x!r} {p.y!r} {p.z!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
