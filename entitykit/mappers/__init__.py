"""
Mapper layer.

Mappers are the single source of truth for converting between input DTOs,
domain models, storage entities and output DTOs of one resource type.
"""
from .base_mapper import BaseMapper
from .partial_mapper import BasePartialMapper
from .composition import ensure_acyclic

__all__ = ["BaseMapper", "BasePartialMapper", "ensure_acyclic"]
