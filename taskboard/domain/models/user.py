"""
User domain model.
Represents a person who can own projects.
"""

from dataclasses import dataclass

from taskboard.domain.models.base import BaseEntity, ValidationError


NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 120


@dataclass(kw_only=True, eq=False)
class User(BaseEntity):
    """
    User aggregate.
    Email is unique across all users, compared case-insensitively.
    """

    name: str
    email: str

    def __post_init__(self):
        self.validate()

    @classmethod
    def create(cls, name: str, email: str) -> "User":
        """Build a new, not yet persisted user."""
        return cls(name=name, email=email)

    def validate(self) -> None:
        """Validate user state."""
        if not self.name or not self.name.strip():
            raise ValidationError("User name is required", "name")

        if len(self.name) > NAME_MAX_LENGTH:
            raise ValidationError(
                f"User name too long (max {NAME_MAX_LENGTH} characters)", "name"
            )

        if not self.email or not self.email.strip():
            raise ValidationError("User email is required", "email")

        if len(self.email) > EMAIL_MAX_LENGTH:
            raise ValidationError(
                f"User email too long (max {EMAIL_MAX_LENGTH} characters)", "email"
            )

    def replace(self, name: str, email: str) -> None:
        """Full replace of the mutable fields."""
        self.name = name
        self.email = email
        self.validate()

    def email_differs_from(self, email: str) -> bool:
        """Check whether the given email is a different address, ignoring case."""
        return self.email.lower() != email.lower()
