"""Search query specification."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, Field

from pgfts.models.searchable import Searchable, SearchableOptions


class Trashed(StrEnum):
    """How soft-deleted rows are treated by a search."""

    WITHOUT = "without"
    WITH = "with"
    ONLY = "only"


class Where(BaseModel):
    """Column comparison filter: ``column <operator> value``."""

    kind: Literal["where"] = "where"
    column: str
    value: Any = None
    operator: str = Field(default="=", description="Comparison operator: =, !=, <, <=, >, >=")


class WhereIn(BaseModel):
    """Membership filter: ``column IN (values)``."""

    kind: Literal["where_in"] = "where_in"
    column: str
    values: list[Any] = Field(default_factory=list)


class RawWhere(BaseModel):
    """Raw SQL filter with named bound parameters, e.g. ``"views > :min_views"``."""

    kind: Literal["raw"] = "raw"
    sql: str
    params: dict[str, Any] = Field(default_factory=dict)


Filter = Where | WhereIn | RawWhere


class Order(BaseModel):
    """Explicit ordering clause."""

    column: str
    direction: Literal["asc", "desc"] = "asc"


class SearchQuery(BaseModel):
    """Everything a search engine needs to run one full-text query.

    Filters are applied in list order. ``soft_delete_column`` is the
    capability flag for soft-deletable record types; ``trashed`` decides what
    happens with soft-deleted rows when it is set.
    """

    query: str = Field(description="Free-text search query")
    index: str = Field(description="Table holding the search column")
    key_name: str = Field(default="id", description="Primary key column")
    wheres: list[Filter] = Field(default_factory=list, description="Filters, applied in order")
    orders: list[Order] = Field(
        default_factory=list,
        description="Explicit ordering; empty means rank descending then key ascending",
    )
    limit: int | None = Field(default=None, ge=0, description="Maximum number of rows")
    offset: int = Field(default=0, ge=0, description="Number of rows to skip")
    soft_delete_column: str | None = Field(default=None, description="Soft-delete timestamp column, if any")
    trashed: Trashed = Field(default=Trashed.WITHOUT, description="Soft-deleted row handling")
    search_using: str | None = Field(default=None, description="tsquery function override")
    options: SearchableOptions | None = Field(
        default=None,
        description="Search column, text search config and ranking of the record type",
    )

    @classmethod
    def for_model(cls, model: type[Searchable], query: str, **kwargs: Any) -> SearchQuery:
        """Build a query for a ``Searchable`` type, taking table, key, options and soft-delete column from it."""
        kwargs.setdefault("index", model.searchable_as())
        kwargs.setdefault("key_name", model.key_name())
        kwargs.setdefault("soft_delete_column", model.soft_delete_column())
        kwargs.setdefault("options", model.searchable_options())
        return cls(query=query, **kwargs)

    def where(self, column: str, value: Any, operator: str = "=") -> SearchQuery:
        self.wheres.append(Where(column=column, value=value, operator=operator))
        return self

    def where_in(self, column: str, values: list[Any]) -> SearchQuery:
        self.wheres.append(WhereIn(column=column, values=list(values)))
        return self

    def where_raw(self, sql: str, **params: Any) -> SearchQuery:
        self.wheres.append(RawWhere(sql=sql, params=params))
        return self

    def order_by(self, column: str, direction: Literal["asc", "desc"] = "asc") -> SearchQuery:
        self.orders.append(Order(column=column, direction=direction))
        return self

    def take(self, limit: int) -> SearchQuery:
        self.limit = limit
        return self

    def skip(self, offset: int) -> SearchQuery:
        self.offset = offset
        return self

    def with_trashed(self) -> SearchQuery:
        self.trashed = Trashed.WITH
        return self

    def only_trashed(self) -> SearchQuery:
        self.trashed = Trashed.ONLY
        return self
