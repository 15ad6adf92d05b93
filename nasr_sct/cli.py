#!/usr/bin/env python3

"""
Command line tool: build a VRC sector file from a NASR subscription.

Example:
    nasr-sct 28DaySubscription_Effective_2025-10-02.zip -f ZHU -o zhu.sct2
"""

import sys
import argparse
import logging
from typing import List, Optional

from . import config
from .render import Sct2Document
from .sources import NasrSubscriptionSource

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Generate VRC sct2 sections from an FAA NASR subscription')
    parser.add_argument('input', nargs='?', help='NASR subscription zip (downloaded when omitted)')
    parser.add_argument('-o', '--output', default=config.DEFAULT_OUTPUT, help='Output sct2 file')
    parser.add_argument('-f', '--filter', dest='artcc_ids', action='append', required=True,
                        help='ARTCC identifier to extract, may be repeated (e.g. -f ZHU -f ZJX)')
    parser.add_argument('--cache-dir', default=config.DEFAULT_CACHE_DIR, help='Directory for downloaded subscriptions')
    parser.add_argument('--airac-date', help='Effective date of the subscription to download (YYYY-MM-DD)')
    parser.add_argument('--force-refresh', action='store_true', help='Download even if a cached copy exists')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format=config.LOG_FORMAT)


def run(args: argparse.Namespace) -> Sct2Document:
    """Extract all sections for ``args.artcc_ids`` and write the output file."""
    source = NasrSubscriptionSource(
        cache_dir=args.cache_dir,
        archive_path=args.input,
        airac_date=args.airac_date,
    )
    if args.force_refresh:
        source.set_force_refresh()

    try:
        airports = source.airports(args.artcc_ids)
        logger.info("Processing tower frequencies")
        twr = source.data_file(config.TWR_MEMBER)
        document = Sct2Document()
        document.add_airports(airports, source.tower_frequencies(twr), source.tower_airspace(twr))
        document.add_vors(source.navaids(args.artcc_ids))
        document.add_fixes(source.fixes(args.artcc_ids))
    finally:
        source.close()

    logger.info(f"Writing sct2 data to {args.output}")
    document.write(args.output)
    return document


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    run(args)
    return 0


if __name__ == '__main__':
    sys.exit(main())
