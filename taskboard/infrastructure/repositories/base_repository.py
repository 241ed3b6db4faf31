"""
Shared transaction handling for SQLAlchemy repositories.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from taskboard.domain.models.base import DomainException, StoreUnavailableError


logger = logging.getLogger(__name__)


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    """True when the driver rejected a row for pointing at a missing parent."""
    # 23503 is the PostgreSQL foreign_key_violation code
    if getattr(exc.orig, "pgcode", None) == "23503":
        return True
    return "foreign key" in str(exc.orig).lower()


class SQLAlchemyRepository:
    """
    Base class for repositories backed by a SQLAlchemy session.
    Every write is committed on its own; failures roll the session back.
    """

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def reading(self, operation: str) -> Iterator[None]:
        """Translate driver failures raised while reading."""
        try:
            yield
        except SQLAlchemyError as exc:
            logger.error(f"Store failure during {operation}: {exc}")
            raise StoreUnavailableError(operation) from exc

    def commit(
        self,
        operation: str,
        on_conflict: Callable[[], DomainException],
        on_missing_reference: Optional[Callable[[], DomainException]] = None
    ) -> None:
        """
        Flush and commit pending changes.
        A foreign key rejection becomes the error built by ``on_missing_reference``
        when one is given; any other constraint rejection becomes ``on_conflict``.
        """
        try:
            self.session.flush()
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning(f"Constraint rejected {operation}: {exc.orig}")
            if on_missing_reference is not None and is_foreign_key_violation(exc):
                raise on_missing_reference() from exc
            raise on_conflict() from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error(f"Store failure during {operation}: {exc}")
            raise StoreUnavailableError(operation) from exc
