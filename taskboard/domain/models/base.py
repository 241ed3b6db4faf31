"""
Base entity and domain exceptions.
This module contains the foundational classes for all domain entities.
"""

from datetime import datetime
from typing import Optional, Any
from abc import ABC
from dataclasses import dataclass


@dataclass
class BaseEntity(ABC):
    """
    Base class for all domain entities.
    Identity and creation time are assigned by the store on insertion.
    """

    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if they have the same ID and are of the same type."""
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        if self.id is None:
            return hash(id(self))
        return hash((self.__class__.__name__, self.id))

    @property
    def is_new(self) -> bool:
        """Check if entity is new (not persisted)."""
        return self.id is None

    def validate(self) -> None:
        """
        Validate the entity's state.
        Should be overridden by subclasses to implement specific validation rules.
        Raises ValidationError if the entity is in an invalid state.
        """
        pass


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when entity validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class BusinessRuleViolation(DomainException):
    """Exception raised when a business rule is violated."""

    def __init__(self, message: str):
        super().__init__(message, "BUSINESS_RULE_VIOLATION")


class EntityNotFoundError(DomainException):
    """Exception raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} not found: {entity_id}"
        super().__init__(message, "ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


class DuplicateEntityError(DomainException):
    """Exception raised when a write would violate a uniqueness scope."""

    def __init__(self, entity_type: str, field: str, value: Any, scope: Optional[str] = None):
        message = f"{entity_type} {field} '{value}' already exists"
        if scope:
            message = f"{message} {scope}"
        super().__init__(message, "DUPLICATE_ENTITY")
        self.entity_type = entity_type
        self.field = field
        self.value = value
        self.scope = scope


class WebhookDeliveryError(DomainException):
    """Exception raised when an outbound webhook event could not be delivered."""

    def __init__(self, message: str = "Failed to send webhook event"):
        super().__init__(message, "WEBHOOK_DELIVERY_FAILED")


class StoreUnavailableError(DomainException):
    """Exception raised when the persistence layer fails for reasons not classified above."""

    def __init__(self, operation: str):
        super().__init__(f"Store failure during {operation}", "STORE_UNAVAILABLE")
        self.operation = operation
