"""
Request DTOs

Base shapes for payloads accepted from callers. The ``id`` is optional and
mutable: it detects client-supplied IDs on create and is compared against
the path ID on update.
"""
from .base_input import BaseInputDTO, BasePartialInputDTO

__all__ = ["BaseInputDTO", "BasePartialInputDTO"]
