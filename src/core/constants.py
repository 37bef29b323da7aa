"""Core constants used across pricefeed modules.

This module centralizes source-format and rendering constants.
Keeping values here avoids magic literals in parsing logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_SOURCE_PATH = Path("libs/SPY.csv")
DEFAULT_LOG_LEVEL = "WARNING"
SOURCE_ENCODING = "utf-8"
FIELD_DELIMITER = ","
QUOTE_CHARACTER = '"'
REQUIRED_FIELD_COUNT = 7
VALUE_FIELD_COUNT = 6
VOLUME_SUFFIX = "M"
VOLUME_MULTIPLIER = 1_000_000
PERCENT_SUFFIX = "%"
RECORD_RENDER_FORMAT = (
    "Date: {date} | Price: {price:.2f} | Open: {open:.2f} | High: {high:.2f} "
    "| Low: {low:.2f} | Volume: {volume:.0f} | Change: {percent_change:.2f}%"
)
TRUE_FLAG_VALUES = ("1", "true", "yes", "on")
FALSE_FLAG_VALUES = ("0", "false", "no", "off", "")
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
