"""
Application factory.

Builds a FastAPI application serving the given resource routers.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response
from sqlalchemy.engine import Engine

from entitykit.config import Settings, get_settings
from entitykit.constants import HTTPStatus
from entitykit.database import init_database
from entitykit.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(
    *routers: APIRouter,
    settings: Optional[Settings] = None,
    bind: Optional[Engine] = None,
    title: str = "entitykit",
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        *routers: Resource routers built with build_crud_router
        settings: Settings to use (defaults to the process settings)
        bind: Engine whose tables are created on startup (defaults to the
            configured engine)
        title: OpenAPI title

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_database(bind)
        logger.info(f"{title} started with {len(routers)} resource router(s)")
        yield
        logger.info(f"{title} stopped")

    app = FastAPI(title=title, lifespan=lifespan)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Malformed payloads and identifiers are bad requests
        logger.warning(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
        return Response(status_code=HTTPStatus.BAD_REQUEST)

    for router in routers:
        app.include_router(router)

    return app
