"""
Domain models for the taskboard.
This module exports all domain entities, value objects and exceptions.
"""

# Base classes
from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    BusinessRuleViolation,
    EntityNotFoundError,
    DuplicateEntityError,
    WebhookDeliveryError,
    StoreUnavailableError
)

# Pagination
from .page import Page, PageRequest

# Domain entities
from .user import User
from .project import Project
from .task import Task, TaskStatus, TaskPriority

__all__ = [
    # Base
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "WebhookDeliveryError",
    "StoreUnavailableError",

    # Pagination
    "Page",
    "PageRequest",

    # Entities
    "User",
    "Project",
    "Task",
    "TaskStatus",
    "TaskPriority",
]
