"""Structured logging configuration using structlog.

pgfts modules log through stdlib ``logging.getLogger(__name__)``. The handler
installed here renders those records, and SQLAlchemy's, with the same
structlog processor chain used for structlog loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from pgfts.config.settings import DatabaseSettings, ObservabilitySettings

HANDLER_NAME = "pgfts"
SQL_LOGGER = "sqlalchemy.engine"


def setup_logging(
    settings: ObservabilitySettings | None = None,
    database: DatabaseSettings | None = None,
) -> None:
    """Configure structured logging for pgfts.

    Calling it again replaces the handler installed by the previous call.

    Args:
        settings: Observability settings. Uses defaults if None.
        database: Database settings; ``echo`` turns on SQL statement logging
            through the ``sqlalchemy.engine`` logger.
    """
    log_level = getattr(settings, "log_level", "info").upper() if settings else "INFO"
    log_format = getattr(settings, "log_format", "json") if settings else "json"
    level = getattr(logging, log_level, logging.INFO)

    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer = structlog.dev.ConsoleRenderer() if log_format == "console" else structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    # INFO on sqlalchemy.engine logs statements, DEBUG adds result rows
    echo = bool(database and database.echo)
    logging.getLogger(SQL_LOGGER).setLevel(min(level, logging.INFO) if echo else logging.WARNING)
