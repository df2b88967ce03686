"""Configuration — settings models and the database engine factory."""

from pgfts.config.settings import DatabaseSettings, EngineSettings, ObservabilitySettings, Settings

__all__ = ["DatabaseSettings", "EngineSettings", "ObservabilitySettings", "Settings"]
