"""
User repository interface.
Defines the contract for user data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from taskboard.domain.models.page import Page, PageRequest
from taskboard.domain.models.user import User


class UserRepository(ABC):
    """
    Repository interface for User aggregate.
    Defines all operations needed for user data persistence.
    """

    @abstractmethod
    def save(self, user: User) -> User:
        """
        Insert or update a user.
        Returns the stored user with its id and creation time.
        Raises DuplicateEntityError if the storage uniqueness constraint rejects the write.
        """
        pass

    @abstractmethod
    def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Find a user by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    def exists_by_id(self, user_id: int) -> bool:
        pass

    @abstractmethod
    def exists_by_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """
        Check if a user other than ``exclude_id`` already uses the email, ignoring case.
        """
        pass

    @abstractmethod
    def list(self, page_request: PageRequest) -> Page[User]:
        """
        Return one page of users ordered by id descending.
        """
        pass

    @abstractmethod
    def delete(self, user_id: int) -> bool:
        """
        Delete a user by ID.
        Returns True if successful, False if user not found.
        """
        pass
