"""
Page value object returned by paginated scans.
"""

from dataclasses import dataclass, field
from math import ceil
from typing import Generic, List, TypeVar


T = TypeVar('T')


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page request. Bounds are enforced by the caller."""

    page: int = 0
    size: int = 20

    @property
    def offset(self) -> int:
        """Calculate offset for database queries."""
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    One page of an ordered, filtered scan.
    ``total_elements`` counts every matching record, not just this page.
    """

    content: List[T] = field(default_factory=list)
    page: int = 0
    size: int = 20
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        return ceil(self.total_elements / self.size) if self.size > 0 else 0
