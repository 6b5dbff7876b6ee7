"""
Service layer.
"""
from .interfaces import ICrudService
from .crud_service import CrudService

__all__ = ["ICrudService", "CrudService"]
