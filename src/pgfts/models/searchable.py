"""Searchable record contract and per-type search options.

A record type opts into full-text search by subclassing ``Searchable``::

    class Post(Searchable):
        __soft_delete_column__ = "deleted_at"
        __searchable_options__ = SearchableOptions(
            config="english",
            rank=RankOptions(fields={"title": "A", "summary": "B"}),
        )

        @classmethod
        def searchable_as(cls) -> str:
            return "posts"

        def get_key(self) -> int:
            return self.id

        def to_searchable_dict(self) -> dict[str, Any]:
            return {"body": self.body, "title": self.title, "summary": self.summary}

        @classmethod
        def fetch_by_keys(cls, keys):
            return session.scalars(select(cls).where(cls.id.in_(keys))).all()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Any, ClassVar

from pydantic import BaseModel, Field


class RankOptions(BaseModel):
    """Field weighting and ranking options for one record type."""

    fields: dict[str, str] = Field(
        default_factory=dict,
        description="Field name to weight label (A, B, C or D; A ranks highest)",
    )
    weights: list[float] | None = Field(
        default=None,
        description="Ranking weights for the D, C, B, A labels, in that order",
    )
    normalization: int | None = Field(default=None, description="Rank normalization bitmask")
    function: str | None = Field(default=None, description="Ranking function: ts_rank or ts_rank_cd")


class SearchableOptions(BaseModel):
    """Per record type search options.

    ``None`` means "use the engine setting".
    """

    column: str | None = Field(default=None, description="tsvector column holding the parsed document")
    config: str | None = Field(default=None, description="Text search configuration, e.g. 'english'")
    maintain_index: bool = Field(default=True, description="Whether the engine maintains this type's vectors")
    external: bool = Field(
        default=False,
        description="Vectors live in a separate table (searchable_as) keyed by the record key",
    )
    rank: RankOptions = Field(default_factory=RankOptions)


class Searchable(ABC):
    """Contract for record types that can be indexed by a search engine.

    Records are plain objects owned by the host application; the engine only
    reads them through these methods.
    """

    __search_key__: ClassVar[str] = "id"
    __soft_delete_column__: ClassVar[str | None] = None
    __searchable_options__: ClassVar[SearchableOptions] = SearchableOptions()

    @classmethod
    @abstractmethod
    def searchable_as(cls) -> str:
        """Name of the table holding the search column."""

    @abstractmethod
    def get_key(self) -> Any:
        """Primary key value of this record."""

    @abstractmethod
    def to_searchable_dict(self) -> dict[str, Any]:
        """Field name to raw text; the first field is always indexed."""

    @classmethod
    @abstractmethod
    def fetch_by_keys(cls, keys: Sequence[Any]) -> Iterable[Searchable]:
        """Load the records with the given keys in a single lookup.

        The returned order does not matter; missing keys are simply absent.
        """

    def searchable_additional_dict(self) -> dict[str, Any]:
        """Extra column values written together with the search vector."""
        return {}

    @classmethod
    def searchable_options(cls) -> SearchableOptions:
        return cls.__searchable_options__

    @classmethod
    def key_name(cls) -> str:
        return cls.__search_key__

    @classmethod
    def soft_delete_column(cls) -> str | None:
        return cls.__soft_delete_column__
