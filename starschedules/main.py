#!/usr/bin/env python3
"""
starschedules - STAR TV programme schedules

Command line front end: fetches one channel's listings and prints them as
text or XML.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .client import ScheduleClient
from .config import ChannelRegistry
from .downloader import ScheduleDownloader
from .errors import ScheduleError

# Package version
from . import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all options"""
    parser = argparse.ArgumentParser(
        prog="starschedules",
        description="STAR TV programme schedules (indya.com)",
    )

    parser.add_argument(
        "--version", "-v", action="version", version=f"%(prog)s {__version__}"
    )

    parser.add_argument(
        "--list-channels", action="store_true",
        help="Show available channels and exit"
    )

    parser.add_argument(
        "--channel", "-c", type=str.lower, default="news",
        choices=sorted(ChannelRegistry().keys()),
        help="Channel to fetch (default: news)",
    )

    # Date, all three or none
    parser.add_argument("--year", type=int, help="Four digit year (default: today)")
    parser.add_argument("--month", type=int, help="Month 1-12 (default: today)")
    parser.add_argument("--day", type=int, help="Day 1-31 (default: today)")

    parser.add_argument(
        "--format", "-f", choices=["text", "xml"], default="text",
        help="Output format (default: text)"
    )

    parser.add_argument(
        "--output", "-o", type=Path,
        help="Write output to specified file instead of stdout"
    )

    parser.add_argument(
        "--timeout", type=float,
        help="HTTP timeout in seconds (default: none)"
    )

    # Log level selection
    level_group = parser.add_mutually_exclusive_group()
    level_group.add_argument(
        "--warning", "-w", action="store_true",
        help="Only log warnings and errors"
    )
    level_group.add_argument(
        "--debug", action="store_true",
        help="Log all debug information (very verbose)"
    )

    parser.add_argument(
        "--log-file", type=Path,
        help="Also write the log to specified file"
    )

    return parser


def setup_logging(level: int, log_file: Optional[Path] = None):
    """Setup logging: console on stderr, optional file"""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(message)s", datefmt="%Y/%m/%d %H:%M:%S")
        )
        root_logger.addHandler(file_handler)


def get_log_level(args) -> int:
    if args.debug:
        return logging.DEBUG
    if args.warning:
        return logging.WARNING
    return logging.INFO


def get_date_params(parser: argparse.ArgumentParser, args) -> Optional[dict]:
    """Build the client date mapping; all of --year/--month/--day or none"""
    values = (args.year, args.month, args.day)
    if all(value is None for value in values):
        return None
    if any(value is None for value in values):
        parser.error("--year, --month and --day must be given together")
    return {"yyyy": args.year, "mm": args.month, "dd": args.day}


def main(argv=None) -> int:
    """Main application entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.list_channels:
        registry = ChannelRegistry()
        for key in registry.keys():
            print(f"{key:<6} {registry.resolve(key)}")
        return 0

    setup_logging(get_log_level(args), args.log_file)
    logging.debug("starschedules v%s", __version__)

    params = get_date_params(parser, args)

    try:
        with ScheduleClient(params, downloader=ScheduleDownloader(timeout=args.timeout)) as client:
            listings = client.get_listings(args.channel)
            if args.format == "xml":
                output = client.render_xml(listings)
            else:
                output = client.render_text(listings)
            logging.debug("Statistics: %s", client.get_statistics())
    except ScheduleError as e:
        logging.error("%s", e)
        return 1

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(output, encoding="utf-8")
        logging.info("Listings written to %s (%d listings)", args.output, len(listings))
    else:
        sys.stdout.write(output)
        if output and not output.endswith("\n"):
            sys.stdout.write("\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
