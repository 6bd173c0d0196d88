"""Logging configuration (structlog + Logfire)."""
