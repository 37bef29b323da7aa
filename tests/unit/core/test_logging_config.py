"""Unit tests for structured logging configuration."""

from __future__ import annotations

import json

from core.logging_config import configure_logging, get_logger


def test_logger_writes_json_events_to_stderr(capsys) -> None:
    """Events at or above the threshold should be JSON lines on stderr."""
    configure_logging("INFO")
    try:
        get_logger("tests.logging").info("price_rows_loaded", record_count=2)
        captured = capsys.readouterr()
    finally:
        configure_logging()

    payload = json.loads(captured.err.strip())
    assert captured.out == ""
    assert payload["event"] == "price_rows_loaded" and payload["record_count"] == 2


def test_logger_filters_events_below_threshold(capsys) -> None:
    """Events below the configured level should be dropped."""
    configure_logging("WARNING")
    get_logger("tests.logging").info("price_rows_loaded", record_count=2)

    assert capsys.readouterr().err == ""
