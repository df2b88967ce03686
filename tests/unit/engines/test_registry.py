"""Tests for the engine registry."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from pgfts.config.settings import EngineSettings
from pgfts.engines.base.exceptions import EngineNotFoundError
from pgfts.engines.base.registry import EngineRegistry, default_registry
from pgfts.engines.postgres.engine import PostgresEngine


class TestEngineRegistry:
    def test_register_and_create(self, db: MagicMock) -> None:
        registry = EngineRegistry()
        registry.register("pgsql", PostgresEngine)

        engine = registry.create("pgsql", db=db, settings=EngineSettings(config="simple"))

        assert isinstance(engine, PostgresEngine)
        assert registry.get("pgsql") is engine
        assert registry.registered_engines == ["pgsql"]
        assert registry.active_engines == ["pgsql"]

    def test_create_unknown_engine(self) -> None:
        with pytest.raises(EngineNotFoundError, match="No engine registered"):
            EngineRegistry().create("solr")

    def test_get_before_create(self) -> None:
        registry = EngineRegistry()
        registry.register("pgsql", PostgresEngine)

        with pytest.raises(EngineNotFoundError, match="not created"):
            registry.get("pgsql")

    def test_register_overwrites(self) -> None:
        registry = EngineRegistry()
        registry.register("pgsql", PostgresEngine)
        registry.register("pgsql", PostgresEngine)
        assert registry.registered_engines == ["pgsql"]

    def test_health_check_all(self, db: MagicMock) -> None:
        registry = default_registry()
        registry.create("pgsql", db=db)

        health = registry.health_check_all()

        assert health["pgsql"].status == "healthy"

    def test_default_registry(self) -> None:
        assert default_registry().registered_engines == ["pgsql"]
