"""Command-line interface for diskinfo."""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .collectors import collect_disks
from .config import DEFAULT_FORMAT, OUTPUT_FORMATS, ReportConfig
from .errors import ProviderError, RenderError
from .renderers import get_renderer

# Setup logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("diskinfo")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="diskinfo",
        description="diskinfo - Disk usage summary for mounted volumes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--version", action="version", version=f"diskinfo {__version__}")
    parser.add_argument(
        "-format", "--format", "-f",
        dest="format",
        default=DEFAULT_FORMAT,
        metavar="FORMAT",
        help=f"Output format: {', '.join(OUTPUT_FORMATS)} (default: {DEFAULT_FORMAT})",
    )
    parser.add_argument(
        "-a", "--all",
        action="store_true",
        help="Include pseudo, memory and network filesystems",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log skipped partitions and other diagnostics to stderr",
    )

    return parser


def run(config: ReportConfig, provider=None) -> int:
    """Collect disk usage and write the report to stdout."""
    try:
        disks = collect_disks(provider, include_virtual_mounts=config.include_virtual_mounts)
    except ProviderError as e:
        logger.error(f"Error getting partitions: {e}")
        return 1

    logger.debug(f"Collected {len(disks)} disk(s), rendering {config.format}")

    try:
        get_renderer(config.format)(disks)
    except RenderError as e:
        logger.error(str(e))
        return 1

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = ReportConfig.from_args(args)

    if config.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.format.lower() not in OUTPUT_FORMATS:
        logger.debug(f"Unknown format {args.format!r}, using {config.format}")

    try:
        return run(config)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
