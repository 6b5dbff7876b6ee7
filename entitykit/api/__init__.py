"""
Transport layer: the generic controller and its FastAPI routes.
"""
from .crud_controller import CrudController
from .crud_router import build_crud_router, to_http_response

__all__ = ["CrudController", "build_crud_router", "to_http_response"]
