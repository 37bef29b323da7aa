"""Public SDK surface for pricefeed.

This module provides a stable import path for library users.
It re-exports the record model, config, and loading operations.
"""

from __future__ import annotations

from core.config import PriceFeedConfig
from core.errors import (
    PriceFeedConfigError,
    PriceFeedError,
    PriceFeedIngestError,
    PriceFeedParseError,
)
from core.types import PriceRecord
from ingest.pipeline import (
    emit_price_records,
    load_chronological_records,
    render_price_records,
)
from ingest.price_reader import parse_price_line, read_price_records

__all__ = [
    "PriceFeedConfig",
    "PriceFeedConfigError",
    "PriceFeedError",
    "PriceFeedIngestError",
    "PriceFeedParseError",
    "PriceRecord",
    "emit_price_records",
    "load_chronological_records",
    "parse_price_line",
    "read_price_records",
    "render_price_records",
]
