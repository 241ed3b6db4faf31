"""
Project mapper for converting between domain entities and database models.
"""

from taskboard.domain.models.project import Project
from taskboard.infrastructure.db.models import ProjectModel
from taskboard.infrastructure.mappers.user_mapper import UserMapper


class ProjectMapper:
    """Maps between Project domain entity and ProjectModel database model."""

    def __init__(self):
        self.user_mapper = UserMapper()

    def domain_to_model(self, project: Project) -> ProjectModel:
        """Convert Project domain entity to a new ProjectModel."""
        model = ProjectModel(
            name=project.name,
            description=project.description,
            owner_id=project.owner_id
        )
        if project.id is not None:
            model.id = project.id
        if project.created_at is not None:
            model.created_at = project.created_at
        return model

    def update_model(self, model: ProjectModel, project: Project) -> ProjectModel:
        """Copy the mutable fields of the entity onto a loaded model."""
        model.name = project.name
        model.description = project.description
        # Loaded relationships are expired on commit and reload from the key
        model.owner_id = project.owner_id
        return model

    def model_to_domain(self, model: ProjectModel) -> Project:
        """Convert ProjectModel to Project domain entity, with its owner when loaded."""
        owner = self.user_mapper.model_to_domain(model.owner) if model.owner is not None else None
        return Project(
            id=model.id,
            created_at=model.created_at,
            name=model.name,
            description=model.description,
            owner_id=model.owner_id,
            owner=owner
        )
