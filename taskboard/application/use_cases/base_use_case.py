"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from taskboard.domain.models.base import DomainException


R = TypeVar('R')

logger = logging.getLogger(__name__)


class BaseUseCase(ABC, Generic[R]):
    """
    Base class for all use cases.
    Times the run and logs failures; domain exceptions propagate to the caller.
    """

    def execute(self, *args: Any) -> R:
        """
        Execute the use case with timing and failure logging.
        """
        started = time.perf_counter()
        name = type(self).__name__

        try:
            result = self._execute_business_logic(*args)
        except DomainException as exc:
            logger.debug(f"{name} rejected: {exc.code}: {exc.message}")
            raise

        elapsed = time.perf_counter() - started
        logger.debug(f"{name} finished in {elapsed:.3f}s")
        return result

    @abstractmethod
    def _execute_business_logic(self, *args: Any) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """
        pass


class QueryUseCase(BaseUseCase[R]):
    """
    Base class for query use cases (read operations).
    """
    pass


class CommandUseCase(BaseUseCase[R]):
    """
    Base class for command use cases (write operations).
    Each command is one transaction, committed by the repository it writes through.
    """
    pass
