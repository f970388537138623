"""
FastAPI Application
===================

Main FastAPI app setup with routes, exception handlers and the MongoDB
client lifecycle.
"""
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from users_api import __version__
from users_api.api.v1 import user_router
from users_api.application.services.user_service import UserService
from users_api.core.config import Settings, get_settings
from users_api.core.logging_config import setup_logging
from users_api.di.base_container import BaseContainer
from users_api.di.container import DIContainer
from users_api.domain.exceptions import ClientDisconnected
from users_api.infrastructure.db.mongo_connection import (
    check_database_url,
    close_db,
    init_db,
    ping_db,
)

logger = logging.getLogger(__name__)

CLIENT_CLOSED_REQUEST = 499

_VALIDATION_MESSAGES = {
    "POST": "invalid new user request",
    "PUT": "invalid update user request",
}


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report body validation failures as 400 rather than FastAPI's 422."""
    message = _VALIDATION_MESSAGES.get(request.method, "invalid request")
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": message, "errors": jsonable_encoder(exc.errors())},
    )


async def client_disconnected_handler(request: Request, exc: ClientDisconnected) -> Response:
    """The client is gone; nothing will read this response."""
    logger.warning("Client disconnected during %s %s", request.method, request.url.path)
    return Response(status_code=CLIENT_CLOSED_REQUEST)


def _mongo_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(application: FastAPI):
        client = init_db(settings.database_url)
        try:
            await ping_db(client)
        except Exception:
            logger.exception("MongoDB unreachable at startup")
            await client.close()
            raise
        
        application.state.container = DIContainer(client, settings)
        logger.info(
            "Serving users from %s.%s",
            settings.database_name,
            settings.users_collection,
        )
        try:
            yield
        finally:
            try:
                await close_db(client)
            except Exception:
                logger.critical("Failed to close MongoDB connection", exc_info=True)
                raise
    
    return lifespan


def create_application(
    user_service: Optional[UserService] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Logging configuration
    - Exception handlers mapping request errors to HTTP responses
    - API route registration under the fixed prefix
    - MongoDB client startup/shutdown, unless a service is supplied
    
    Args:
        user_service: Service to serve requests with. When given, no
            database connection is made (used by tests).
        settings: Settings to use instead of the environment-derived ones
    
    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    
    lifespan = None if user_service is not None else _mongo_lifespan(settings)
    
    application = FastAPI(
        title="Users API",
        description="CRUD API for the User resource",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    
    if user_service is not None:
        container = BaseContainer()
        container.register_singleton(UserService, user_service)
        application.state.container = container
    
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(ClientDisconnected, client_disconnected_handler)
    
    # Register API routers
    application.include_router(user_router, prefix=settings.api_prefix)
    
    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}
    
    return application


def main() -> None:
    """Console entry point: validate configuration and serve on the fixed port."""
    settings = get_settings()
    setup_logging(settings.log_level)
    
    try:
        check_database_url(settings.database_url)
    except ValueError as e:
        print(f"failed to initialize db: {e}")
        sys.exit(1)
    
    application = create_application(settings=settings)
    uvicorn.run(application, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
