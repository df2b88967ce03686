"""Engine Registry — Manages registration and retrieval of search engines.

The registry maps driver names to engine classes and keeps the engine
instances created from them, so that the host application can resolve its
configured driver once and reuse the instance.
"""

from __future__ import annotations

import logging
from typing import Any

from pgfts.engines.base.engine import EngineHealth, SearchEngine
from pgfts.engines.base.exceptions import EngineNotFoundError

logger = logging.getLogger(__name__)


class EngineRegistry:
    """Registry for search engine classes and instances.

    Example:
        >>> registry = EngineRegistry()
        >>> registry.register("pgsql", PostgresEngine)
        >>> registry.create("pgsql", db=db_engine, settings=settings.engine)
        >>> engine = registry.get("pgsql")
    """

    def __init__(self) -> None:
        self._classes: dict[str, type[SearchEngine]] = {}
        self._instances: dict[str, SearchEngine] = {}

    def register(self, name: str, engine_class: type[SearchEngine]) -> None:
        """Register an engine class under a driver name."""
        if name in self._classes:
            logger.warning("Overwriting existing engine registration: %s", name)
        self._classes[name] = engine_class
        logger.info("Registered engine: %s", name)

    def create(self, name: str, **kwargs: Any) -> SearchEngine:
        """Create an engine instance and keep it for later ``get`` calls.

        Args:
            name: The registered driver name.
            **kwargs: Passed to the engine constructor.

        Raises:
            EngineNotFoundError: If no engine is registered under this name.
        """
        if name not in self._classes:
            raise EngineNotFoundError(
                f"No engine registered with name '{name}'. "
                f"Available engines: {list(self._classes.keys())}"
            )

        engine = self._classes[name](**kwargs)
        self._instances[name] = engine
        logger.info("Created engine: %s", name)
        return engine

    def get(self, name: str) -> SearchEngine:
        """Get a created engine instance by name.

        Raises:
            EngineNotFoundError: If the engine has not been created.
        """
        if name not in self._instances:
            raise EngineNotFoundError(f"Engine '{name}' is not created. Call create() first.")
        return self._instances[name]

    def health_check_all(self) -> dict[str, EngineHealth]:
        """Run health checks on all created engines."""
        return {name: engine.health_check() for name, engine in self._instances.items()}

    @property
    def registered_engines(self) -> list[str]:
        """List all registered driver names."""
        return list(self._classes.keys())

    @property
    def active_engines(self) -> list[str]:
        """List all created engine names."""
        return list(self._instances.keys())


def default_registry() -> EngineRegistry:
    """Registry with the built-in engines registered."""
    from pgfts.engines.postgres.engine import PostgresEngine

    registry = EngineRegistry()
    registry.register("pgsql", PostgresEngine)
    return registry
