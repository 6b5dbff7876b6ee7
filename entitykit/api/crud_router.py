"""
FastAPI routes for a resource.

build_crud_router exposes one CrudController over HTTP:

    GET    {prefix}            list
    GET    {prefix}/{id}       get by id
    POST   {prefix}            create
    PUT    {prefix}/{id}       update by id
    DELETE {prefix}/{id}       delete by id
    DELETE {prefix}            delete all
    POST   {prefix}/batch      batch add
    PUT    {prefix}/batch      batch update
"""

from typing import Any, Callable, List, Optional, Sequence, Type

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from entitykit.constants import BATCH_PATH, HTTPStatus
from entitykit.dtos import ControllerResponse
from .crud_controller import CrudController


def to_http_response(result: ControllerResponse) -> Response:
    """Render a ControllerResponse as a FastAPI response."""
    content = result.to_content()
    if content is None:
        return Response(status_code=result.status_code)
    return JSONResponse(status_code=result.status_code, content=jsonable_encoder(content))


def build_crud_router(
    controller_provider: Callable[..., CrudController],
    id_type: Type,
    input_dto: Type,
    output_dto: Type,
    prefix: str,
    tags: Optional[Sequence[str]] = None,
) -> APIRouter:
    """
    Build the router for one resource.

    Args:
        controller_provider: FastAPI dependency returning a CrudController
        id_type: Type of the path identifier (e.g. int)
        input_dto: Pydantic model accepted as request body
        output_dto: Pydantic model returned to callers
        prefix: URL prefix, e.g. "/widgets"
        tags: OpenAPI tags

    Returns:
        APIRouter with the eight lifecycle routes

    Note:
        The batch routes take precedence over ``/{id}``. With a ``str`` id
        type, a record whose id is literally "batch" cannot be updated
        through ``PUT {prefix}/{id}``; use the batch update instead.
    """
    router = APIRouter(prefix=prefix, tags=list(tags) if tags else None)
    error_responses: dict[int | str, dict[str, Any]] = {
        HTTPStatus.BAD_REQUEST: {"description": "Invalid identifier or payload"},
        HTTPStatus.INTERNAL_SERVER_ERROR: {"description": "Store or internal failure"},
    }

    # Batch routes are registered first so "/batch" is never read as an id
    @router.post(BATCH_PATH, response_model=List[output_dto], status_code=HTTPStatus.CREATED,
                 responses=error_responses)
    def add_all(dtos: List[input_dto], controller: CrudController = Depends(controller_provider)):
        """Insert a batch of records, all or nothing."""
        return to_http_response(controller.add_all(dtos))

    @router.put(BATCH_PATH, response_model=List[output_dto], responses={
        **error_responses,
        HTTPStatus.NOT_FOUND: {"description": "A target record does not exist"},
    })
    def update_all(dtos: List[input_dto], controller: CrudController = Depends(controller_provider)):
        """Update a batch of existing records, all or nothing."""
        return to_http_response(controller.update_all(dtos))

    @router.get("", response_model=List[output_dto])
    def get_all(controller: CrudController = Depends(controller_provider)):
        """List every record."""
        return to_http_response(controller.get_all())

    @router.get("/{entity_id}", response_model=output_dto, responses={
        HTTPStatus.NOT_FOUND: {"description": "Record not found"},
    })
    def get(entity_id: id_type, controller: CrudController = Depends(controller_provider)):
        """Get one record by id."""
        return to_http_response(controller.get(entity_id))

    @router.post("", response_model=output_dto, status_code=HTTPStatus.CREATED, responses={
        **error_responses,
        HTTPStatus.CONFLICT: {"description": "Identifier already exists"},
    })
    def create(dto: input_dto, controller: CrudController = Depends(controller_provider)):
        """Create a record."""
        return to_http_response(controller.create(dto))

    @router.put("/{entity_id}", response_model=output_dto, responses={
        **error_responses,
        HTTPStatus.NOT_FOUND: {"description": "Record not found"},
    })
    def update(entity_id: id_type, dto: input_dto, controller: CrudController = Depends(controller_provider)):
        """Update the record addressed by the path."""
        return to_http_response(controller.update(entity_id, dto))

    @router.delete("/{entity_id}", status_code=HTTPStatus.NO_CONTENT, response_class=Response, responses={
        HTTPStatus.NOT_FOUND: {"description": "Record not found"},
    })
    def delete(entity_id: id_type, controller: CrudController = Depends(controller_provider)):
        """Delete one record."""
        return to_http_response(controller.delete(entity_id))

    @router.delete("", status_code=HTTPStatus.NO_CONTENT, response_class=Response)
    def delete_all(controller: CrudController = Depends(controller_provider)):
        """Delete every record."""
        return to_http_response(controller.delete_all())

    return router
