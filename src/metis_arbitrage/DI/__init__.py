"""Dependency injection."""

from metis_arbitrage.DI.container import Container

__all__ = ["Container"]
