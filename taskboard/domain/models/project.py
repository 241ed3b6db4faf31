"""
Project domain model.
A named container of tasks, owned by exactly one user.
"""

from dataclasses import dataclass
from typing import Optional

from taskboard.domain.models.base import BaseEntity, ValidationError
from taskboard.domain.models.user import User


NAME_MAX_LENGTH = 120
DESCRIPTION_MAX_LENGTH = 500


@dataclass(kw_only=True, eq=False)
class Project(BaseEntity):
    """
    Project aggregate.

    The owner is a weak reference: the project stores ``owner_id`` and the
    repository may attach a loaded ``owner`` snapshot for reads.
    """

    name: str
    owner_id: int
    description: Optional[str] = None
    owner: Optional[User] = None

    def __post_init__(self):
        self.validate()

    @classmethod
    def create(cls, name: str, owner: User, description: Optional[str] = None) -> "Project":
        """Build a new project for an existing owner."""
        return cls(name=name, description=description, owner_id=owner.id, owner=owner)

    def validate(self) -> None:
        """Validate project state."""
        if not self.name or not self.name.strip():
            raise ValidationError("Project name is required", "name")

        if len(self.name) > NAME_MAX_LENGTH:
            raise ValidationError(
                f"Project name too long (max {NAME_MAX_LENGTH} characters)", "name"
            )

        if self.description and len(self.description) > DESCRIPTION_MAX_LENGTH:
            raise ValidationError(
                f"Description too long (max {DESCRIPTION_MAX_LENGTH} characters)", "description"
            )

        if self.owner_id is None:
            raise ValidationError("Owner ID is required", "owner_id")

    def replace(self, name: str, description: Optional[str], owner: User) -> None:
        """Full replace of name, description and owner reference."""
        self.name = name
        self.description = description
        self.owner_id = owner.id
        self.owner = owner
        self.validate()
