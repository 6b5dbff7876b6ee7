"""
Dependency injection providers for FastAPI.

This module provides factory functions that wire a resource's repository,
service and controller per request, following the Dependency Inversion
Principle. Tests swap the store by overriding ``get_db``.
"""

from typing import Callable, Type

from fastapi import Depends
from sqlalchemy.orm import Session

from entitykit.api import CrudController
from entitykit.database import get_db
from entitykit.mappers import BaseMapper, ensure_acyclic
from entitykit.repositories import BaseRepository
from entitykit.services import CrudService

ServiceFactory = Callable[[Session], CrudService]


def service_factory(
    entity_type: Type,
    mapper: BaseMapper,
    service_class: Type[CrudService] = CrudService,
) -> ServiceFactory:
    """
    Factory for building a resource's service on a given session.

    Args:
        entity_type: SQLAlchemy entity class of the resource
        mapper: Mapper shared by every request (mappers are stateless);
            its composition is checked once here
        service_class: CrudService subclass carrying the resource's rules

    Returns:
        Callable taking a database session and returning the service

    Raises:
        ConfigurationError: If the mapper's embedded mappers form a cycle
    """
    ensure_acyclic(mapper)

    def build(db: Session) -> CrudService:
        return service_class(BaseRepository(db, entity_type), mapper, check_mappers=False)

    return build


def controller_provider(build_service: ServiceFactory) -> Callable[..., CrudController]:
    """
    FastAPI dependency producing a controller bound to the request session.

    Args:
        build_service: Result of service_factory for the resource

    Returns:
        Dependency callable suitable for ``Depends``
    """
    def get_controller(db: Session = Depends(get_db)) -> CrudController:
        service = build_service(db)
        return CrudController(service, service.mapper)

    return get_controller
