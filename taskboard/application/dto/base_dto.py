"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from typing import Callable, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel

from taskboard.domain.models.page import Page, PageRequest


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # camelCase on the wire, snake_case in Python
        alias_generator=to_camel,
        # Allow population by field name or alias
        populate_by_name=True,
        # DTOs are immutable once built
        frozen=True,
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""

    model_config = ConfigDict(extra="forbid")


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""
    pass


def not_blank(value: Optional[str]) -> Optional[str]:
    """Reject strings made only of whitespace. None is left to the field's optionality."""
    if value is not None and not value.strip():
        raise ValueError("must not be blank")
    return value


class PageRequestDTO(RequestDTO):
    """Zero-based pagination parameters."""

    page: int = Field(default=0, ge=0, description="Page number, starting at 0")
    size: int = Field(default=20, ge=1, description="Items per page")

    def to_page_request(self) -> PageRequest:
        return PageRequest(page=self.page, size=self.size)


T = TypeVar('T')
S = TypeVar('S')


class PageResponseDTO(ResponseDTO, Generic[T]):
    """Paginated list envelope."""

    content: List[T] = Field(description="Items on this page")
    page: int = Field(description="Current page number")
    size: int = Field(description="Requested page size")
    total_elements: int = Field(description="Number of matching items across all pages")
    total_pages: int = Field(description="Total number of pages")

    @classmethod
    def from_page(cls, page: Page[S], transform: Callable[[S], T]) -> "PageResponseDTO[T]":
        """Build the envelope from a domain page, converting each item."""
        return cls(
            content=[transform(item) for item in page.content],
            page=page.page,
            size=page.size,
            total_elements=page.total_elements,
            total_pages=page.total_pages
        )
