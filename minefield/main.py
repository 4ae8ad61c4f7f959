"""
Main entry point for the minefield chain reaction ranker

Usage:
    python -m minefield --file input.txt

Environment variables:
    MINEFIELD_INPUT_FILE: default input file (default: input.txt)
    MINEFIELD_WORKERS: simulation threads (default: 1)
    MINEFIELD_LOG_LEVEL: logging level (default: INFO)
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from minefield.config import DEFAULT_INPUT_FILE, DEFAULT_WORKERS, LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL, LOG_LEVELS
from minefield.errors import MinefieldError
from minefield.models import WinnerReport
from minefield.parser import load_field
from minefield.ranking import assign_peaks, rank_mines, winners

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the mines whose chain reaction has the most explosions in one time step"
    )
    parser.add_argument("--file", default=DEFAULT_INPUT_FILE,
                        help="file containing the input data")
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS,
                        help="number of threads used to simulate chain reactions")
    parser.add_argument("--json", action="store_true",
                        help="print winners as a JSON array")
    parser.add_argument("--log-level", default=LOG_LEVEL, type=str.upper,
                        choices=LOG_LEVELS,
                        help="logging level")
    return parser


def find_winners(path: str, workers: int = 1) -> List[WinnerReport]:
    """
    Load a field, simulate every mine and report the winners.

    Raises:
        OSError: File cannot be opened
        MinefieldError: Invalid input data
    """
    field = load_field(path)
    logger.info(f"Loaded {len(field)} mines from {path}")

    assign_peaks(field, workers=workers)
    ranked = rank_mines(field.mines)
    return [WinnerReport.from_mine(rank, mine) for rank, mine in enumerate(winners(ranked))]


def main(argv: Optional[List[str]] = None):
    """Main entry point"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT
    )

    try:
        reports = find_winners(args.file, workers=args.workers)
    except OSError as e:
        logger.error(f"cannot open file {args.file}: {e}")
        sys.exit(1)
    except MinefieldError as e:
        logger.error(f"cannot parse input data into a minefield: {e}")
        sys.exit(1)

    if not reports:
        logger.warning(f"No mines in {args.file}")
        return

    logger.info(f"{len(reports)} winning mine(s)")
    if args.json:
        print(json.dumps([report.model_dump() for report in reports], indent=2))
    else:
        for report in reports:
            print(report.to_line())


if __name__ == "__main__":
    main()
