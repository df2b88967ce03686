"""Shared test fixtures and configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest
import structlog
from sqlalchemy.dialects import postgresql
from support import Post

from pgfts.config.settings import EngineSettings, Settings
from pgfts.engines.postgres.engine import PostgresEngine


@pytest.fixture(autouse=True)
def _reset_post_store() -> None:
    Post.store = {}
    Post.lookups = []


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo handlers and levels installed by setup_logging."""
    root = logging.getLogger()
    sql = logging.getLogger("sqlalchemy.engine")
    handlers, level, sql_level = root.handlers[:], root.level, sql.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    sql.setLevel(sql_level)
    structlog.reset_defaults()


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def db() -> MagicMock:
    """SQLAlchemy engine double; ``connect()`` and ``begin()`` share one connection."""
    db = MagicMock(name="db")
    conn = db.begin.return_value.__enter__.return_value
    db.connect.return_value.__enter__.return_value = conn
    conn.dialect = postgresql.dialect()
    conn.execute.return_value.scalar.return_value = "'foo':1"
    conn.execute.return_value.first.return_value = (1,)
    return db


@pytest.fixture
def conn(db: MagicMock) -> MagicMock:
    return db.begin.return_value.__enter__.return_value


@pytest.fixture
def engine(db: MagicMock) -> PostgresEngine:
    return PostgresEngine(db, EngineSettings())
