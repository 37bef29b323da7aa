"""Pricefeed CLI entry point.

This module maps command-line overrides onto runtime config and
prints the chronological price listing.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from core.config import PriceFeedConfig
from core.errors import PriceFeedError
from core.logging_config import configure_logging, get_logger
from ingest.pipeline import emit_price_records, load_chronological_records

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="pricefeed",
        description="Print daily price records from a CSV file, earliest first",
    )
    parser.add_argument("--source", help="Override PRICEFEED_SOURCE_PATH for this run")
    parser.add_argument(
        "--skip-unparseable-rows",
        action="store_true",
        help="Skip rows with non-numeric price values instead of failing",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the pricefeed CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)
    try:
        config = _build_config(args)
        configure_logging(config.log_level)
        records = load_chronological_records(config)
    except PriceFeedError as error:
        _LOGGER.error("pricefeed_failed", error_type=type(error).__name__)
        print(f"error={error}", file=sys.stderr)
        return 1
    emit_price_records(records)
    return 0


def _build_config(args: argparse.Namespace) -> PriceFeedConfig:
    """Build config from environment with CLI overrides.

    Args:
        args: Parsed CLI args.

    Returns:
        Effective runtime config.
    """
    config = PriceFeedConfig.from_env()
    if args.source:
        config = replace(config, source_path=Path(args.source).expanduser())
    if args.skip_unparseable_rows:
        config = replace(config, skip_unparseable_rows=True)
    return config
