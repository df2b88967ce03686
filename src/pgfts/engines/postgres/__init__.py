"""PostgreSQL engine — tsvector / tsquery based full-text search."""

from pgfts.engines.postgres.engine import PostgresEngine

__all__ = ["PostgresEngine"]
