"""
Project DTOs for the application layer.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from taskboard.domain.models.project import Project, NAME_MAX_LENGTH, DESCRIPTION_MAX_LENGTH
from taskboard.domain.models.user import User
from .base_dto import RequestDTO, ResponseDTO, not_blank


class ProjectRequestDTO(RequestDTO):
    """DTO for creating or fully replacing a project."""

    name: str = Field(max_length=NAME_MAX_LENGTH, description="Project name, unique per owner ignoring case")
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    owner_id: int = Field(description="ID of the owning user")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        return not_blank(v)


class OwnerSummaryDTO(ResponseDTO):
    """Owner snapshot embedded in project responses."""

    id: int
    name: str
    email: str

    @classmethod
    def from_domain(cls, user: User) -> "OwnerSummaryDTO":
        return cls(id=user.id, name=user.name, email=user.email)


class ProjectResponseDTO(ResponseDTO):
    """DTO for project responses."""

    id: int
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    owner: Optional[OwnerSummaryDTO] = None

    @classmethod
    def from_domain(cls, project: Project) -> "ProjectResponseDTO":
        return cls(
            id=project.id,
            name=project.name,
            description=project.description,
            created_at=project.created_at,
            owner=OwnerSummaryDTO.from_domain(project.owner) if project.owner else None
        )
