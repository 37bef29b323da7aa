"""Price loading orchestration.

This module coordinates reading, chronological ordering, and
rendering of price records for output.
"""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from core.config import PriceFeedConfig
from core.logging_config import get_logger
from core.types import PriceRecord
from ingest.price_reader import read_price_records

_LOGGER = get_logger(__name__)


def load_chronological_records(config: PriceFeedConfig) -> list[PriceRecord]:
    """Load configured price source and return records earliest first.

    Sources list the most recent day first, so the file-order list is
    reversed as a whole. The entire file is held in memory.

    Args:
        config: Runtime configuration naming the source path.

    Returns:
        Records in reverse file order.
    """
    records = read_price_records(config.source_path, config)
    records.reverse()
    return records


def render_price_records(records: Iterable[PriceRecord]) -> list[str]:
    """Render each record as one output line."""
    return [record.render() for record in records]


def emit_price_records(records: Iterable[PriceRecord], stream: TextIO | None = None) -> int:
    """Write rendered records to a text stream, one per line.

    Args:
        records: Records in output order.
        stream: Target stream, standard output when omitted.

    Returns:
        Number of lines written.
    """
    target = stream if stream is not None else sys.stdout
    lines = render_price_records(records)
    for line in lines:
        target.write(line + "\n")
    _LOGGER.debug("price_records_emitted", line_count=len(lines))
    return len(lines)
