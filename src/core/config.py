"""Runtime configuration model for pricefeed.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_SOURCE_PATH,
    FALSE_FLAG_VALUES,
    SUPPORTED_LOG_LEVELS,
    TRUE_FLAG_VALUES,
)
from core.errors import PriceFeedConfigError


@dataclass(frozen=True)
class PriceFeedConfig:
    """Validated runtime configuration.

    Attributes:
        source_path: Price CSV file to load.
        skip_unparseable_rows: Skip rows with non-numeric price fields
            instead of failing the run.
        log_level: Minimum structured log level written to stderr.
    """

    source_path: Path = DEFAULT_SOURCE_PATH
    skip_unparseable_rows: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "PriceFeedConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            PriceFeedConfigError: If environment values are invalid.
        """
        source_value = os.getenv("PRICEFEED_SOURCE_PATH", str(DEFAULT_SOURCE_PATH))
        skip_value = os.getenv("PRICEFEED_SKIP_UNPARSEABLE_ROWS", "false")
        log_level_value = os.getenv("PRICEFEED_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return cls(
            source_path=Path(source_value).expanduser(),
            skip_unparseable_rows=_parse_flag("PRICEFEED_SKIP_UNPARSEABLE_ROWS", skip_value),
            log_level=_parse_log_level(log_level_value),
        )


def _parse_flag(env_name: str, raw_value: str) -> bool:
    """Parse a boolean environment flag.

    Args:
        env_name: Variable name used in error messages.
        raw_value: Raw string from environment.

    Returns:
        Parsed boolean.

    Raises:
        PriceFeedConfigError: If value is not a recognized flag.
    """
    normalized = raw_value.strip().lower()
    if normalized in TRUE_FLAG_VALUES:
        return True
    if normalized in FALSE_FLAG_VALUES:
        return False
    raise PriceFeedConfigError(
        f"Invalid {env_name} value: expected one of "
        f"{TRUE_FLAG_VALUES + FALSE_FLAG_VALUES[:-1]}, got '{raw_value}'."
    )


def _parse_log_level(raw_value: str) -> str:
    normalized = raw_value.strip().upper()
    if normalized not in SUPPORTED_LOG_LEVELS:
        raise PriceFeedConfigError(
            "Invalid PRICEFEED_LOG_LEVEL value: "
            f"expected one of {SUPPORTED_LOG_LEVELS}, got '{raw_value}'."
        )
    return normalized
