"""
Shared query parameters for paginated listings.
"""

from typing import Annotated

from fastapi import Query

from taskboard.config import get_settings


DEFAULT_PAGE_SIZE = get_settings().default_page_size

PageQuery = Annotated[int, Query(ge=0, description="Page number, starting at 0")]
SizeQuery = Annotated[int, Query(ge=1, description="Items per page")]
