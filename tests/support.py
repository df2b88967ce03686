"""Record types and helpers shared by the test suite."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any
from unittest.mock import MagicMock

from sqlalchemy.dialects import postgresql

from pgfts.models.searchable import RankOptions, Searchable, SearchableOptions

# ── Record types ─────────────────────────────────────────────────────────────


class Post(Searchable):
    """Plain searchable record with one weighted secondary field."""

    __searchable_options__ = SearchableOptions(rank=RankOptions(fields={"nullable": "B"}))

    store: dict[Any, Post] = {}
    lookups: list[list[Any]] = []

    def __init__(self, id: int = 1, text: str = "Foo", nullable: str | None = None) -> None:
        self.id = id
        self.text = text
        self.nullable = nullable

    @classmethod
    def searchable_as(cls) -> str:
        return "posts"

    def get_key(self) -> int:
        return self.id

    def to_searchable_dict(self) -> dict[str, Any]:
        return {"text": self.text, "nullable": self.nullable}

    @classmethod
    def fetch_by_keys(cls, keys: Sequence[Any]) -> list[Post]:
        cls.lookups.append(list(keys))
        # Deliberately not in key order
        return [cls.store[k] for k in sorted(keys, reverse=True) if k in cls.store]

    def __repr__(self) -> str:
        return f"Post(id={self.id})"


class SoftDeletePost(Post):
    """Searchable record whose table has a deleted_at column."""

    __soft_delete_column__ = "deleted_at"


class ExternalPost(Post):
    """Record whose vectors live in a separate table."""

    __searchable_options__ = SearchableOptions(
        external=True,
        rank=RankOptions(fields={"nullable": "B"}),
    )

    @classmethod
    def searchable_as(cls) -> str:
        return "posts_search"


class UnmaintainedPost(Post):
    __searchable_options__ = SearchableOptions(maintain_index=False)


# ── Helpers ──────────────────────────────────────────────────────────────────


_BIND_CAST = re.compile(r"((?:%\(\w+\)s|__\[POSTCOMPILE_\w+\]))::[A-Z_][A-Z0-9_]*(?:\[\])?")


def compile_pg(stmt: Any) -> tuple[str, dict[str, Any]]:
    """Compile a statement with the PostgreSQL dialect into SQL text and params.

    Whitespace is collapsed and bind casts (``%(id_1)s::INTEGER``), which only
    some SQLAlchemy releases render, are stripped.
    """
    compiled = stmt.compile(dialect=postgresql.psycopg.dialect())
    sql = _BIND_CAST.sub(r"\1", " ".join(str(compiled).split()))
    return sql, dict(compiled.params)


def executed(conn: MagicMock) -> list[Any]:
    """Statements passed to ``conn.execute``, in call order."""
    return [c.args[0] for c in conn.execute.call_args_list]


