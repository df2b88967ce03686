"""CLI entry point for pgfts index maintenance and ad-hoc searches."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from typing import Any

from pgfts.config.settings import Settings
from pgfts.engines.base.exceptions import ConfigurationError
from pgfts.models.query import SearchQuery, Trashed
from pgfts.models.searchable import Searchable, SearchableOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgfts",
        description="pgfts — PostgreSQL full-text search engine driver",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--database-url",
        type=str,
        default=None,
        help="SQLAlchemy database URL (overrides config)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"pgfts {_get_version()}",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    table_args = argparse.ArgumentParser(add_help=False)
    table_args.add_argument("table", help="Table holding the search column")
    table_args.add_argument("--column", default=None, help="tsvector column (default from settings)")
    table_args.add_argument("--key", default="id", help="Primary key column")
    table_args.add_argument("--ts-config", default=None, help="Text search configuration, e.g. english")

    search = commands.add_parser("search", parents=[table_args], help="Run a ranked full-text query")
    search.add_argument("query", help="Free-text query")
    search.add_argument("--limit", "-n", type=int, default=10, help="Maximum number of rows")
    search.add_argument("--offset", type=int, default=0, help="Rows to skip")
    search.add_argument("--soft-delete-column", default=None, help="Exclude rows where this column is set")
    search.add_argument(
        "--trashed",
        choices=[t.value for t in Trashed],
        default=Trashed.WITHOUT.value,
        help="Soft-deleted row handling",
    )
    search.add_argument("--search-using", default=None, help="tsquery function, e.g. websearch_to_tsquery")

    commands.add_parser("flush", parents=[table_args], help="Null the search column of every row")
    commands.add_parser("create-index", parents=[table_args], help="Add the tsvector column and GIN index")
    commands.add_parser("drop-index", parents=[table_args], help="Drop the GIN index and tsvector column")
    commands.add_parser("health", help="Check database connectivity")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_yaml(args.config) if args.config else Settings()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.database_url:
        settings.database.url = args.database_url
    if args.log_level:
        settings.observability.log_level = args.log_level

    from pgfts.config.database import create_db_engine
    from pgfts.engines.base.registry import default_registry
    from pgfts.observability.logging import setup_logging

    setup_logging(settings.observability, settings.database)

    try:
        db = create_db_engine(settings.database)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    engine = default_registry().create("pgsql", db=db, settings=settings.engine)

    try:
        if args.command == "health":
            health = engine.health_check()
            print(health.model_dump_json(indent=2))
            return 0 if health.status == "healthy" else 1

        model = _table_model(args.table, args.key, args.column, args.ts_config)

        if args.command == "search":
            query = SearchQuery.for_model(
                model,
                args.query,
                limit=args.limit,
                offset=args.offset,
                soft_delete_column=args.soft_delete_column,
                trashed=Trashed(args.trashed),
                search_using=args.search_using,
            )
            rows = engine.search(query)
            print(json.dumps([_row_dict(row) for row in rows], indent=2, default=str))
        elif args.command == "flush":
            engine.flush(model)
        elif args.command == "create-index":
            engine.create_index(model)
        elif args.command == "drop-index":
            engine.delete_index(model)
    finally:
        db.dispose()

    return 0


def _table_model(table: str, key: str, column: str | None, ts_config: str | None) -> type[Searchable]:
    """Record type describing a bare table, for commands that never load records."""

    class TableModel(Searchable):
        __search_key__ = key
        __searchable_options__ = SearchableOptions(column=column, config=ts_config)

        @classmethod
        def searchable_as(cls) -> str:
            return table

        def get_key(self) -> Any:
            raise TypeError(f"{table} is a table-only record type; it has no records")

        def to_searchable_dict(self) -> dict[str, Any]:
            raise TypeError(f"{table} is a table-only record type; it has no records")

        @classmethod
        def fetch_by_keys(cls, keys: Sequence[Any]) -> list[Searchable]:
            return []

    return TableModel


def _row_dict(row: Any) -> dict[str, Any]:
    return dict(row._mapping) if hasattr(row, "_mapping") else dict(row)


def _get_version() -> str:
    """Get the package version."""
    try:
        from pgfts import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    sys.exit(main())
