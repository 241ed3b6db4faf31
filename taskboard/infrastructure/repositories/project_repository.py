"""
Project repository implementation using SQLAlchemy.
"""

from typing import Optional

from sqlalchemy import desc, func
from sqlalchemy.orm import Session, joinedload

from taskboard.domain.models.base import DuplicateEntityError, EntityNotFoundError, BusinessRuleViolation
from taskboard.domain.models.page import Page, PageRequest
from taskboard.domain.models.project import Project
from taskboard.domain.repositories.project_repository import ProjectRepository as ProjectRepositoryInterface
from taskboard.infrastructure.db.models import ProjectModel
from taskboard.infrastructure.mappers.project_mapper import ProjectMapper
from taskboard.infrastructure.pagination import OffsetPagination
from taskboard.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyProjectRepository(SQLAlchemyRepository, ProjectRepositoryInterface):
    """SQLAlchemy implementation of project repository."""

    def __init__(self, session: Session):
        super().__init__(session)
        self.mapper = ProjectMapper()
        self.paginator = OffsetPagination()

    def save(self, project: Project) -> Project:
        """Insert a new project or update an existing one."""
        with self.reading("project save"):
            if project.is_new:
                model = self.mapper.domain_to_model(project)
                self.session.add(model)
            else:
                model = self.session.get(ProjectModel, project.id)
                if not model:
                    raise EntityNotFoundError("Project", project.id)
                self.mapper.update_model(model, project)

        self.commit(
            "project save",
            lambda: DuplicateEntityError(
                "Project", "name", project.name, scope=f"for owner {project.owner_id}"
            ),
            lambda: EntityNotFoundError("User", project.owner_id)
        )

        with self.reading("project save"):
            return self.mapper.model_to_domain(model)

    def get_by_id(self, project_id: int) -> Optional[Project]:
        """Get project by ID, with its owner."""
        with self.reading("project lookup"):
            model = self.session.query(ProjectModel).options(
                joinedload(ProjectModel.owner)
            ).filter(ProjectModel.id == project_id).first()

            if not model:
                return None
            return self.mapper.model_to_domain(model)

    def exists_by_id(self, project_id: int) -> bool:
        with self.reading("project lookup"):
            return self.session.query(
                self.session.query(ProjectModel).filter(ProjectModel.id == project_id).exists()
            ).scalar()

    def exists_by_owner_and_name(
        self,
        owner_id: int,
        name: str,
        exclude_id: Optional[int] = None
    ) -> bool:
        """Check if the owner already has a project with this name, ignoring case."""
        with self.reading("project name check"):
            query = self.session.query(ProjectModel).filter(
                ProjectModel.owner_id == owner_id,
                func.lower(ProjectModel.name) == name.lower()
            )
            if exclude_id is not None:
                query = query.filter(ProjectModel.id != exclude_id)
            return self.session.query(query.exists()).scalar()

    def exists_by_owner(self, owner_id: int) -> bool:
        with self.reading("project owner check"):
            return self.session.query(
                self.session.query(ProjectModel).filter(ProjectModel.owner_id == owner_id).exists()
            ).scalar()

    def list(self, page_request: PageRequest) -> Page[Project]:
        """List projects with owners, newest id first."""
        with self.reading("project listing"):
            return self.paginator.paginate(
                self.session.query(ProjectModel),
                page_request,
                order_by=desc(ProjectModel.id),
                transform=self.mapper.model_to_domain,
                options=[joinedload(ProjectModel.owner)]
            )

    def delete(self, project_id: int) -> bool:
        """Delete project by ID."""
        with self.reading("project delete"):
            model = self.session.get(ProjectModel, project_id)
            if not model:
                return False
            self.session.delete(model)

        self.commit(
            "project delete",
            lambda: BusinessRuleViolation(f"Project {project_id} still has tasks")
        )
        return True
