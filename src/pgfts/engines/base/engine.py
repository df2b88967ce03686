"""Base search engine — Abstract interface for all full-text search engines.

Every engine must implement this interface to be usable by the host
application's model lifecycle hooks. The engine is responsible for:
  1. Keeping each record's search representation up to date
  2. Executing ranked queries and returning raw rows
  3. Mapping raw rows back to records, keys and totals
  4. Reporting health status
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from typing import Any

from pydantic import BaseModel, Field

from pgfts.models.query import SearchQuery
from pgfts.models.result import Page
from pgfts.models.searchable import Searchable


class EngineHealth(BaseModel):
    """Health status of a search engine."""

    status: str = Field(description="Health status: healthy, degraded, unhealthy")
    latency_ms: int = Field(default=0, description="Latency of last health check in ms")
    last_check: str | None = Field(default=None, description="ISO timestamp of last health check")
    message: str | None = Field(default=None, description="Additional health message")


class SearchEngine(ABC):
    """Abstract base class for search engines.

    Engines keep no mutable state between calls; configuration is fixed at
    construction. Raw rows returned by ``search``/``paginate`` expose ``id``,
    ``rank`` and ``total_count`` either as attributes or as mapping keys.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique engine name (e.g., 'pgsql')."""

    @abstractmethod
    def update(self, records: Sequence[Searchable]) -> None:
        """Recompute and store the search representation of each record."""

    @abstractmethod
    def delete(self, records: Sequence[Searchable]) -> None:
        """Remove the search representation of the records."""

    @abstractmethod
    def search(self, query: SearchQuery) -> Sequence[Any]:
        """Execute a search and return the raw, rank-ordered rows."""

    @abstractmethod
    def paginate(self, query: SearchQuery, per_page: int, page: int) -> Sequence[Any]:
        """Execute a search for one page of results."""

    @abstractmethod
    def map_ids(self, results: Sequence[Any]) -> list[Any]:
        """Extract record keys from raw rows, preserving rank order."""

    @abstractmethod
    def map(self, results: Sequence[Any], model: type[Searchable]) -> list[Searchable]:
        """Load the records behind raw rows, preserving rank order."""

    @abstractmethod
    def lazy_map(self, results: Sequence[Any], model: type[Searchable]) -> Iterator[Searchable]:
        """Generator form of ``map``."""

    @abstractmethod
    def get_total_count(self, results: Sequence[Any]) -> int:
        """Total number of matches, ignoring limit and offset."""

    @abstractmethod
    def flush(self, model: type[Searchable]) -> None:
        """Remove the search representation of every record of a type."""

    @abstractmethod
    def create_index(self, model: type[Searchable]) -> None:
        """Create the storage needed to index a record type."""

    @abstractmethod
    def delete_index(self, model: type[Searchable]) -> None:
        """Drop the storage created by ``create_index``."""

    @abstractmethod
    def health_check(self) -> EngineHealth:
        """Check the health of the backing database."""

    def get(self, query: SearchQuery, model: type[Searchable]) -> list[Searchable]:
        """Search and map results in one step.

        Args:
            query: The search specification.
            model: Record type used to load the matching records.

        Returns:
            Matching records in rank order.
        """
        return self.map(self.search(query), model)

    def page(self, query: SearchQuery, model: type[Searchable], per_page: int, page: int = 1) -> Page:
        """Search one page and wrap the mapped records with paging totals."""
        results = self.paginate(query, per_page, page)
        return Page(
            items=self.map(results, model),
            total=self.get_total_count(results),
            per_page=per_page,
            current_page=page,
        )
