"""
User mapper for converting between domain entities and database models.
"""

from taskboard.domain.models.user import User
from taskboard.infrastructure.db.models import UserModel


class UserMapper:
    """Maps between User domain entity and UserModel database model."""

    def domain_to_model(self, user: User) -> UserModel:
        """Convert User domain entity to a new UserModel."""
        model = UserModel(name=user.name, email=user.email)
        # Identity and creation time stay unset so the store assigns them
        if user.id is not None:
            model.id = user.id
        if user.created_at is not None:
            model.created_at = user.created_at
        return model

    def update_model(self, model: UserModel, user: User) -> UserModel:
        """Copy the mutable fields of the entity onto a loaded model."""
        model.name = user.name
        model.email = user.email
        return model

    def model_to_domain(self, model: UserModel) -> User:
        """Convert UserModel to User domain entity."""
        return User(
            id=model.id,
            created_at=model.created_at,
            name=model.name,
            email=model.email
        )
