"""
Command line entry point.

Usage:
    nhlstreams games.m3u
    nhlstreams games.m3u --date 2019-10-10
    nhlstreams games.m3u --config config.yaml --log-level DEBUG
"""

import argparse
import asyncio
import datetime as dt
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import yaml
from pydantic import ValidationError

from nhlstreams import __version__
from nhlstreams.config import load_config
from nhlstreams.errors import NHLStreamsError
from nhlstreams.pipeline import PlaylistRun, validate_playlist_path
from nhlstreams.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _parse_date(value: str) -> dt.date:
    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date (expected YYYY-MM-DD): {value}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nhlstreams",
        description="Create an .m3u playlist of today's NHL.TV broadcast feeds",
    )
    parser.add_argument("path", type=Path, help="Destination playlist file (.m3u)")
    parser.add_argument(
        "--date",
        type=_parse_date,
        default=None,
        help="Schedule date as YYYY-MM-DD (default: today, local time)",
    )
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


async def _run(path: Path, date: dt.date, app_config) -> Path:
    async with PlaylistRun(app_config) as run:
        return await run.run(path, date)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the CLI.

    Returns:
        Process exit status: 0 on success, 1 on any fatal error
    """
    args = build_parser().parse_args(argv)

    try:
        app_config = load_config(args.config)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(
        log_level=args.log_level or app_config.logging.level,
        log_file_name=app_config.logging.file,
        log_format=app_config.logging.format,
    )

    try:
        path = validate_playlist_path(args.path)

        print("Creating playlist...")
        date = args.date or dt.date.today()
        written = asyncio.run(_run(path, date, app_config))
    except NHLStreamsError as e:
        logger.debug("Playlist run failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Playlist saved to: {written}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
