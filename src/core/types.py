"""Shared typed models.

This module defines the immutable price record produced by the
reader and consumed by rendering, keeping the interface explicit.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import RECORD_RENDER_FORMAT


@dataclass(frozen=True)
class PriceRecord:
    """One trading day parsed from the price source.

    Attributes:
        date: Date token copied verbatim from the source row.
        price: Closing price.
        open: Opening price.
        high: Daily high.
        low: Daily low.
        volume: Trade volume in absolute units.
        percent_change: Signed daily change in percentage points.
    """

    date: str
    price: float
    open: float
    high: float
    low: float
    volume: float
    percent_change: float

    @property
    def month(self) -> str:
        """Return the date token under its legacy accessor name."""
        return self.date

    def render(self) -> str:
        """Render the record as a single fixed-format output line."""
        return RECORD_RENDER_FORMAT.format(
            date=self.date,
            price=self.price,
            open=self.open,
            high=self.high,
            low=self.low,
            volume=self.volume,
            percent_change=self.percent_change,
        )

    def __str__(self) -> str:
        return self.render()
