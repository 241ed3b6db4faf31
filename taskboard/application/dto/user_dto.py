"""
User DTOs for the application layer.
"""

from datetime import datetime
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import Field, field_validator

from taskboard.domain.models.user import User, NAME_MAX_LENGTH, EMAIL_MAX_LENGTH
from .base_dto import RequestDTO, ResponseDTO, not_blank


class CreateUserRequestDTO(RequestDTO):
    """DTO for creating a new user."""

    name: str = Field(max_length=NAME_MAX_LENGTH, description="Display name")
    email: str = Field(description="Email address, stored as given, unique ignoring case")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return not_blank(v)

    @field_validator('email')
    @classmethod
    def validate_email_address(cls, v):
        if len(v) > EMAIL_MAX_LENGTH:
            raise ValueError(f"must be at most {EMAIL_MAX_LENGTH} characters")
        # Syntax only; the normalized form is discarded so the address keeps its case
        try:
            validate_email(v, check_deliverability=False, test_environment=True)
        except EmailNotValidError as exc:
            raise ValueError(f"must be a well-formed email address: {exc}") from exc
        return v


class UpdateUserRequestDTO(CreateUserRequestDTO):
    """DTO for replacing a user's name and email."""
    pass


class UserResponseDTO(ResponseDTO):
    """DTO for user responses."""

    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponseDTO":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at
        )
