"""
CRUD Controller

Stateless translation layer between transport payloads and a CrudService.
Every method returns a ControllerResponse; no method raises.
"""

import logging
from typing import Generic, List, Optional, Sequence, TypeVar

from entitykit.constants import HTTPStatus
from entitykit.dtos import ControllerResponse
from entitykit.exceptions import EntityIdMismatchError
from entitykit.mappers import BaseMapper
from entitykit.services import ICrudService
from entitykit.utils.error_handlers import handle_controller_errors

ID = TypeVar('ID')
M = TypeVar('M')
E = TypeVar('E')
I = TypeVar('I')
O = TypeVar('O')

logger = logging.getLogger(__name__)


class CrudController(Generic[ID, M, E, I, O]):
    """
    Controller for one resource.

    Converts input DTOs to models through the mapper, delegates to the
    service, converts results to output DTOs and turns failures into status
    codes. The only check of its own is the path-ID vs body-ID comparison
    on update.
    """

    def __init__(self, service: ICrudService[ID, M], mapper: BaseMapper[ID, M, E, I, O]):
        self.service = service
        self.mapper = mapper

    @handle_controller_errors("Get all entities")
    def get_all(self) -> ControllerResponse[List[O]]:
        items = [self.mapper.to_output_dto(model) for model in self.service.find_all()]
        logger.debug(f"Returning {len(items)} {self.mapper.entity_name} record(s)")
        return ControllerResponse(status_code=HTTPStatus.OK, body=items)

    @handle_controller_errors("Get entity")
    def get(self, id: ID) -> ControllerResponse[O]:
        dto_out = self.mapper.to_output_dto(self.service.find_by_id(id))
        return ControllerResponse(status_code=HTTPStatus.OK, body=dto_out)

    @handle_controller_errors("Create entity")
    def create(self, dto: I) -> ControllerResponse[O]:
        created = self.service.create(self.mapper.to_model(dto))
        return ControllerResponse(status_code=HTTPStatus.CREATED, body=self.mapper.to_output_dto(created))

    @handle_controller_errors("Update entity")
    def update(self, id: ID, dto: I) -> ControllerResponse[O]:
        """
        Update the entity addressed by the path.

        A body without an id takes the path id; a body with a different id
        is rejected before the service is called.
        """
        body_id: Optional[ID] = dto.id
        if body_id is None:
            dto = dto.model_copy(update={"id": id})
        elif body_id != id:
            raise EntityIdMismatchError(id, body_id)

        updated = self.service.update(self.mapper.to_model(dto))
        return ControllerResponse(status_code=HTTPStatus.OK, body=self.mapper.to_output_dto(updated))

    @handle_controller_errors("Delete entity")
    def delete(self, id: ID) -> ControllerResponse[None]:
        self.service.delete_by_id(id)
        return ControllerResponse(status_code=HTTPStatus.NO_CONTENT)

    @handle_controller_errors("Delete all entities")
    def delete_all(self) -> ControllerResponse[None]:
        self.service.delete_all()
        return ControllerResponse(status_code=HTTPStatus.NO_CONTENT)

    @handle_controller_errors("Add entities")
    def add_all(self, dtos: Sequence[I]) -> ControllerResponse[List[O]]:
        added = self.service.add_all([self.mapper.to_model(dto) for dto in dtos])
        return ControllerResponse(
            status_code=HTTPStatus.CREATED,
            body=[self.mapper.to_output_dto(model) for model in added]
        )

    @handle_controller_errors("Update entities")
    def update_all(self, dtos: Sequence[I]) -> ControllerResponse[List[O]]:
        updated = self.service.update_all([self.mapper.to_model(dto) for dto in dtos])
        return ControllerResponse(
            status_code=HTTPStatus.OK,
            body=[self.mapper.to_output_dto(model) for model in updated]
        )
