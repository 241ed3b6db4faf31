"""
Event DTOs for the outbound webhook.
"""

from typing import Optional

from pydantic import Field, field_validator

from .base_dto import RequestDTO, not_blank


class EventRequestDTO(RequestDTO):
    """Message to forward; blank source and type fall back to defaults."""

    message: str = Field(description="Event message")
    source: Optional[str] = Field(default=None, description="Event source")
    type: Optional[str] = Field(default=None, description="Event type")

    @field_validator('message')
    @classmethod
    def validate_message(cls, v):
        return not_blank(v)
