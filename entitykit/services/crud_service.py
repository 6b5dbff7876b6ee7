"""
CRUD Service

Generic lifecycle service for one resource: orchestrates a repository and a
mapper, owns the id rules and batch atomicity, and raises the error taxonomy
from entitykit.exceptions.
"""

import logging
from typing import Generic, List, Optional, Sequence, TypeVar

from entitykit.exceptions import (
    EntityIdAlreadyExistsError,
    EntityIdRequiredError,
    EntityNotFoundError,
    StoreError,
)
from entitykit.mappers import BaseMapper, ensure_acyclic
from entitykit.repositories import IRepository
from entitykit.utils.logging_utils import log_operation
from .interfaces import ICrudService

ID = TypeVar('ID')
M = TypeVar('M')
E = TypeVar('E')
I = TypeVar('I')
O = TypeVar('O')

logger = logging.getLogger(__name__)


class CrudService(ICrudService[ID, M], Generic[ID, M, E, I, O]):
    """
    Service for the full lifecycle of one resource type.

    The service is the only component that talks to the repository. It holds
    no state between calls; each public operation runs inside
    ``repository.transaction()``.

    Resources with business rules subclass it and override ``validate``.
    """

    def __init__(
        self,
        repository: IRepository[E, ID],
        mapper: BaseMapper[ID, M, E, I, O],
        check_mappers: bool = True,
    ):
        """
        Initialize CrudService.

        Args:
            repository: Storage for the resource's entities
            mapper: Conversions between the resource's shapes
            check_mappers: Verify the mapper composition; callers that
                already checked this mapper pass False

        Raises:
            ConfigurationError: If the mapper's embedded mappers form a cycle
        """
        if check_mappers:
            ensure_acyclic(mapper)
        self.repository = repository
        self.mapper = mapper

    @property
    def entity_name(self) -> str:
        return self.mapper.entity_name

    def validate(self, model: M) -> None:
        """
        Resource-specific business rules.

        Called for every model before it is written. Raise
        EntityValidationError to reject it. The default accepts everything.
        """

    @log_operation("find_all")
    def find_all(self) -> List[M]:
        with self.repository.transaction():
            models = [self.mapper.entity_to_model(entity) for entity in self.repository.find_all()]
            logger.debug(f"Retrieved {len(models)} {self.entity_name} record(s)")
            return models

    @log_operation("find_by_id")
    def find_by_id(self, id: ID) -> M:
        with self.repository.transaction():
            entity = self.repository.find_by_id(id)
            if entity is None:
                raise EntityNotFoundError(id, self.entity_name)
            return self.mapper.entity_to_model(entity)

    @log_operation("create")
    def create(self, model: M) -> M:
        with self.repository.transaction():
            model_id = self.mapper.extract_id(model)
            if model_id is not None:
                self._ensure_id_available(model_id)
            self.validate(model)

            try:
                saved = self.repository.save(self.mapper.to_entity(model))
            except StoreError as e:
                # Another writer may have claimed the id after the check
                if model_id is not None and e.constraint_violation and self.repository.exists_by_id(model_id):
                    raise EntityIdAlreadyExistsError(model_id, self.entity_name) from e
                raise

            created = self.mapper.entity_to_model(saved)
            logger.info(f"Created {self.entity_name} with ID: {self.mapper.extract_id(created)}")
            return created

    @log_operation("update")
    def update(self, model: M) -> M:
        with self.repository.transaction():
            entity = self._load_for_update(model, "update")
            self.validate(model)
            self.mapper.apply_model_to(entity, model)
            saved = self.repository.save(entity)
            updated = self.mapper.entity_to_model(saved)
            logger.info(f"Updated {self.entity_name} with ID: {self.mapper.extract_id(updated)}")
            return updated

    @log_operation("delete_by_id")
    def delete_by_id(self, id: ID) -> None:
        with self.repository.transaction():
            if not self.repository.delete_by_id(id):
                raise EntityNotFoundError(id, self.entity_name)
        logger.info(f"Deleted {self.entity_name} with ID: {id}")

    @log_operation("delete_all")
    def delete_all(self) -> None:
        with self.repository.transaction():
            self.repository.delete_all()
        logger.info(f"Deleted all {self.entity_name} records")

    @log_operation("add_all")
    def add_all(self, models: Sequence[M]) -> List[M]:
        if not models:
            return []

        with self.repository.transaction():
            entities = []
            for model in models:
                self.validate(model)
                entities.append(self.mapper.to_entity(model))

            saved = self.repository.save_all_atomically(entities)
            added = [self.mapper.entity_to_model(entity) for entity in saved]
            logger.info(f"Added {len(added)} {self.entity_name} record(s)")
            return added

    @log_operation("update_all")
    def update_all(self, models: Sequence[M]) -> List[M]:
        if not models:
            return []

        with self.repository.transaction():
            entities = []
            for model in models:
                entity = self._load_for_update(model, "update_all")
                self.validate(model)
                entities.append(self.mapper.apply_model_to(entity, model))

            saved = self.repository.save_all_atomically(entities)
            updated = [self.mapper.entity_to_model(entity) for entity in saved]
            logger.info(f"Updated {len(updated)} {self.entity_name} record(s)")
            return updated

    def _ensure_id_available(self, model_id: ID) -> None:
        """
        Validate that a client-supplied ID is not already stored.

        Raises:
            EntityIdAlreadyExistsError: If an entity with the ID exists
        """
        logger.debug(f"Validating new {self.entity_name} ID: {model_id}")
        if self.repository.exists_by_id(model_id):
            raise EntityIdAlreadyExistsError(model_id, self.entity_name)

    def _load_for_update(self, model: M, operation: str) -> E:
        model_id: Optional[ID] = self.mapper.extract_id(model)
        if model_id is None:
            raise EntityIdRequiredError(operation)

        entity = self.repository.find_by_id(model_id)
        if entity is None:
            raise EntityNotFoundError(model_id, self.entity_name)
        return entity
