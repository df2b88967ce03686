"""Data models — searchable contract, query specification and results."""

from pgfts.models.query import Order, RawWhere, SearchQuery, Trashed, Where, WhereIn
from pgfts.models.result import Page
from pgfts.models.searchable import RankOptions, Searchable, SearchableOptions

__all__ = [
    "Order",
    "Page",
    "RankOptions",
    "RawWhere",
    "SearchQuery",
    "Searchable",
    "SearchableOptions",
    "Trashed",
    "Where",
    "WhereIn",
]
