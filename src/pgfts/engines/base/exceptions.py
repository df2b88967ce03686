"""Engine-specific exceptions.

Database failures are not wrapped: SQLAlchemy / DBAPI errors reach the
caller unchanged.
"""


class EngineError(Exception):
    """Base exception for search engine errors."""


class ConfigurationError(EngineError):
    """Raised when engine or application configuration is invalid."""


class EngineNotFoundError(EngineError):
    """Raised when a requested engine is not registered or not created."""
