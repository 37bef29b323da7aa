"""Pricefeed exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class PriceFeedError(Exception):
    """Base exception for all pricefeed failures."""


class PriceFeedConfigError(PriceFeedError):
    """Raised for invalid runtime configuration."""


class PriceFeedIngestError(PriceFeedError):
    """Raised when the price source file cannot be read."""


class PriceFeedParseError(PriceFeedIngestError):
    """Raised when a numeric price field cannot be parsed."""
