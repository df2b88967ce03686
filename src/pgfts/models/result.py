"""Search result models."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, Field, computed_field


class Page(BaseModel):
    """One page of mapped search results."""

    items: list[Any] = Field(default_factory=list, description="Mapped records, in rank order")
    total: int = Field(default=0, description="Number of matching rows across all pages")
    per_page: int = Field(description="Page size")
    current_page: int = Field(default=1, description="1-based page number")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def last_page(self) -> int:
        if self.per_page <= 0:
            return 1
        return max(1, math.ceil(self.total / self.per_page))

    @property
    def has_more_pages(self) -> bool:
        return self.current_page < self.last_page
