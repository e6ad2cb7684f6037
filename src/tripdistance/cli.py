#!/usr/bin/env python3
"""
Trip distance tool.
This script reads a log of "<traveler id><TAB><json coordinate>" lines,
groups consecutive readings of each traveler into trips and prints the
great-circle distance travelled on every trip.

Requirements:
    pip install pyproj

"""

from typing import List, Optional, TextIO
import argparse
import logging
import sys

from . import __version__
from .config import TripConfig
from .errors import DecodeExhaustedError
from .pipeline import iter_totals
from .trips import Total

# Configure logging
logger = logging.getLogger("tripdistance")


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="tripdistance",
        description="Total great-circle distance travelled per trip",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "filename",
        type=str,
        nargs="?",
        help="Record file to process, one '<id>\\t<json>' line per reading",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output (implies --log-level DEBUG)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"tripdistance {__version__}",
    )
    return parser


def setup_logging(config: TripConfig) -> None:
    """Setup logging configuration."""
    level = getattr(logging, config.log_level)

    # Create formatter
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    # Create console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    # pyproj logs every PROJ call at DEBUG
    logging.getLogger("pyproj").setLevel(logging.WARNING)


def format_total(total: Total) -> str:
    return f"{total.traveler_id}\t{total.distance:.3f} km"


def print_totals(
    filename: str, config: TripConfig, out: Optional[TextIO] = None
) -> int:
    """
    Run the trip pipeline over a file and print one line per trip.

    Returns:
        Number of trips printed

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not UTF-8 text
        DecodeExhaustedError: If a record cannot be decoded
    """
    count = 0
    for total in iter_totals(filename, config):
        print(format_total(total), file=out)
        count += 1
    return count


def main(argv: Optional[List[str]] = None):
    """
    Parses command-line arguments, processes the record file and prints
    the distance of each trip.
    """
    parser = create_argument_parser()
    args, extra = parser.parse_known_args(argv)

    if not args.filename or extra:
        print("Need a file to process!\n", file=sys.stderr)
        parser.print_usage(sys.stderr)
        sys.exit(1)

    config = TripConfig.from_args(args)

    # Setup logging
    setup_logging(config)
    logger.debug(f"Starting {parser.prog} {__version__}")

    try:
        count = print_totals(args.filename, config)
    except FileNotFoundError:
        logger.error(f"Record file not found: {args.filename}")
        sys.exit(1)
    except PermissionError:
        logger.error(f"Cannot read record file (permission denied): {args.filename}")
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read record file {args.filename}: {e}")
        sys.exit(1)
    except DecodeExhaustedError as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info(f"Processed {count} trips")


if __name__ == "__main__":
    main()
