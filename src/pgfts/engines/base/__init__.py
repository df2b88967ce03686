"""Base engine interface — Abstract classes for full-text search engines."""

from pgfts.engines.base.engine import EngineHealth, SearchEngine
from pgfts.engines.base.registry import EngineRegistry

__all__ = ["EngineHealth", "EngineRegistry", "SearchEngine"]
