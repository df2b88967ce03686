"""Observability — logging setup."""

from pgfts.observability.logging import setup_logging

__all__ = ["setup_logging"]
