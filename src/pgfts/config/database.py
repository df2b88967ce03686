"""SQLAlchemy engine factory."""

from __future__ import annotations

import logging

from sqlalchemy import Engine, create_engine

from pgfts.config.settings import DatabaseSettings
from pgfts.engines.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def create_db_engine(settings: DatabaseSettings) -> Engine:
    """Create a synchronous SQLAlchemy ``Engine`` from database settings.

    Raises:
        ConfigurationError: If no database URL is configured.
    """
    if not settings.url:
        raise ConfigurationError(
            "No database URL configured. Set PGFTS_DATABASE__URL or database.url in the config file."
        )

    # SQL echo goes through the sqlalchemy.engine logger, see setup_logging
    engine = create_engine(settings.url, pool_pre_ping=settings.pool_pre_ping)
    logger.info("Created database engine for %s", engine.url.render_as_string(hide_password=True))
    return engine
