"""Price CSV reader for ingestion.

This module loads daily price rows from a local CSV file.
It normalizes quoted and suffixed text fields into typed records.
"""

from __future__ import annotations

from pathlib import Path

from core.config import PriceFeedConfig
from core.constants import (
    FIELD_DELIMITER,
    PERCENT_SUFFIX,
    QUOTE_CHARACTER,
    REQUIRED_FIELD_COUNT,
    SOURCE_ENCODING,
    VALUE_FIELD_COUNT,
    VOLUME_MULTIPLIER,
    VOLUME_SUFFIX,
)
from core.errors import PriceFeedIngestError, PriceFeedParseError
from core.logging_config import get_logger
from core.types import PriceRecord

_LOGGER = get_logger(__name__)


def read_price_records(source_path: Path, config: PriceFeedConfig) -> list[PriceRecord]:
    """Load price records from a CSV file in file order.

    The first line is discarded as a header. Blank lines, rows with
    fewer than seven fields and rows with an empty value field are
    skipped silently.

    Args:
        source_path: Path to the price CSV file.
        config: Runtime configuration controlling unparseable rows.

    Returns:
        Records in the order their rows appear in the file.

    Raises:
        PriceFeedIngestError: If the file cannot be opened or read.
        PriceFeedParseError: If a value field is not numeric and
            ``config.skip_unparseable_rows`` is false.
    """
    records: list[PriceRecord] = []
    skipped_count = 0
    try:
        with open(source_path, "r", encoding=SOURCE_ENCODING) as handle:
            next(handle, None)
            for line_number, line in enumerate(handle, 2):
                record = _read_line(source_path, line, line_number, config)
                if record is None:
                    skipped_count += 1
                    continue
                records.append(record)
    except (OSError, UnicodeDecodeError) as error:
        raise PriceFeedIngestError(
            f"Failed to read price source at {source_path}: {error}. "
            "Provide an existing, readable CSV file."
        ) from error
    _LOGGER.info(
        "price_rows_loaded",
        source_path=str(source_path),
        record_count=len(records),
        skipped_count=skipped_count,
    )
    return records


def parse_price_line(line: str) -> PriceRecord | None:
    """Parse one data row into a price record.

    Args:
        line: Raw CSV row, with or without its line ending.

    Returns:
        Parsed record, or ``None`` when the row is blank or malformed.

    Raises:
        ValueError: If a non-empty value field is not numeric.
    """
    text = line.rstrip("\r\n")
    if not text.strip():
        return None
    fields = text.replace(QUOTE_CHARACTER, "").split(FIELD_DELIMITER)
    while fields and not fields[-1]:
        fields.pop()
    if len(fields) < REQUIRED_FIELD_COUNT:
        return None
    # Value columns are the last six; a date such as "Jan 02, 2024" spans the rest.
    date = FIELD_DELIMITER.join(fields[:-VALUE_FIELD_COUNT])
    values = fields[-VALUE_FIELD_COUNT:]
    if any(not value for value in values):
        return None
    return PriceRecord(
        date=date,
        price=float(values[0]),
        open=float(values[1]),
        high=float(values[2]),
        low=float(values[3]),
        volume=parse_volume(values[4]),
        percent_change=parse_percent_change(values[5]),
    )


def parse_volume(value: str) -> float:
    """Parse a volume quoted in millions, e.g. ``"57.05M"``."""
    return float(value.replace(VOLUME_SUFFIX, "")) * VOLUME_MULTIPLIER


def parse_percent_change(value: str) -> float:
    """Parse a signed percent change, e.g. ``"-1.23%"``."""
    return float(value.replace(PERCENT_SUFFIX, ""))


def _read_line(
    source_path: Path,
    line: str,
    line_number: int,
    config: PriceFeedConfig,
) -> PriceRecord | None:
    """Parse a file row, applying the unparseable-row policy.

    Args:
        source_path: Parent file path for context.
        line: Raw CSV row.
        line_number: One-based line number in the file.
        config: Runtime configuration.

    Returns:
        Parsed record, or ``None`` when the row is skipped.

    Raises:
        PriceFeedParseError: If the row is unparseable and skipping is off.
    """
    try:
        record = parse_price_line(line)
    except ValueError as error:
        if config.skip_unparseable_rows:
            _LOGGER.warning(
                "price_row_unparseable",
                source_path=str(source_path),
                line_number=line_number,
                reason=str(error),
            )
            return None
        raise PriceFeedParseError(
            f"Failed to parse price row at {source_path}:{line_number}: {error}. "
            "Fix the numeric value or set PRICEFEED_SKIP_UNPARSEABLE_ROWS=1."
        ) from error
    if record is None:
        _LOGGER.debug("price_row_skipped", source_path=str(source_path), line_number=line_number)
    return record
