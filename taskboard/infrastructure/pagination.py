"""
Offset pagination for SQLAlchemy queries.
"""

from typing import Any, Callable, Optional

from sqlalchemy.orm import Query
from sqlalchemy.sql import ColumnElement

from taskboard.domain.models.page import Page, PageRequest


class OffsetPagination:
    """
    Zero-based offset pagination.
    Counts the filtered query once, then fetches a single window of rows.
    """

    def paginate(
        self,
        query: Query,
        page_request: PageRequest,
        order_by: ColumnElement,
        transform: Callable[[Any], Any],
        options: Optional[list] = None
    ) -> Page:
        """
        Paginate query using offset-based pagination.

        Args:
            query: Filtered SQLAlchemy query, without eager loading
            page_request: Requested page number and size
            order_by: Ordering applied to the fetched window
            transform: Converts each row to the page content type
            options: Loader options applied only to the window fetch

        Returns:
            Page carrying the transformed window and the total match count
        """
        # Count without ordering or eager loads
        total_elements = query.order_by(None).count()

        window = query
        if options:
            window = window.options(*options)

        rows = (
            window.order_by(order_by)
            .offset(page_request.offset)
            .limit(page_request.size)
            .all()
        )

        return Page(
            content=[transform(row) for row in rows],
            page=page_request.page,
            size=page_request.size,
            total_elements=total_elements
        )
