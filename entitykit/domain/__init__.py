"""
Domain Layer

In-process business representations, decoupled from storage and transport.
"""
from .base_model import ID, BaseDomainModel, BasePartialModel

__all__ = ["ID", "BaseDomainModel", "BasePartialModel"]
