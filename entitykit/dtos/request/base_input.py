"""
Base Input DTOs
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

ID = TypeVar('ID')


class BaseInputDTO(BaseModel, Generic[ID]):
    """
    Base request DTO for a resource.

    Concrete DTOs parametrize the identifier type, e.g.
    ``class WidgetInput(BaseInputDTO[int])``.
    """

    id: Optional[ID] = Field(None, description="Client-supplied identifier, if any")

    class Config:
        """Pydantic configuration."""
        validate_assignment = True


class BasePartialInputDTO(BaseModel):
    """Base request DTO for a sub-object embedded in a parent payload."""
