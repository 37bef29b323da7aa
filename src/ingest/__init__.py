"""Price ingestion.

This package reads daily price CSV sources into typed records
and orders them chronologically for rendering.
"""
