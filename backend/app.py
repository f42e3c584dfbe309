from __future__ import annotations

# Standard library
import os
import logging as _logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

# Third-party
from fastapi import FastAPI

# Local application imports
from api import (
    allergies,
    equipment,
    ingredients,
    menu_items,
    menu_sections,
    menus,
    recipes,
    restaurants,
)
from api.dependencies import build_services
from api.errors import register_exception_handlers
from api.schemas import ErrorResponse
from domain.shared.ports.document_store import IDocumentStore
from domain.user.auth_provider import IAuthProvider
from infrastructure.auth.auth_middleware import AuthMiddleware
from infrastructure.config import get_repository_backend, load_env_file
from infrastructure.persistence.factory import get_document_store

# Environment from backend/.env; variables already set take precedence.
load_env_file()

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

# Set by the image build (APP_VERSION build arg).
APP_VERSION = os.getenv("APP_VERSION", "0.0.0-dev")

_ROUTERS = (
    allergies.router,
    equipment.router,
    ingredients.router,
    menu_items.router,
    menu_sections.router,
    menus.router,
    recipes.router,
    restaurants.router,
)

__all__: list[str] = ["app", "create_app", "APP_VERSION"]


def create_app(
    store: Optional[IDocumentStore] = None,
    auth_provider: Optional[IAuthProvider] = None,
) -> FastAPI:
    """Build the back-office application.

    Args:
        store: Document store shared by every service (defaults to the
            backend selected by REPOSITORY_BACKEND)
        auth_provider: Token verifier (defaults to JwksAuthProvider,
            created on the first request)

    Returns:
        Configured FastAPI application
    """
    document_store = store or get_document_store()

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        logger = _logging.getLogger("startup")
        logger.info(
            "lifespan.ready",
            extra={
                "version": APP_VERSION,
                "repository_backend": get_repository_backend(),
                "store": type(document_store).__name__,
            },
        )
        try:
            yield
        finally:
            logger.info("lifespan.shutdown", extra={"status": "cleanup"})
            await document_store.close()

    application = FastAPI(
        title="Menu Training Back Office",
        version=APP_VERSION,
        lifespan=lifespan,
        responses={
            code: {"model": ErrorResponse} for code in (400, 401, 403, 404)
        },
    )
    application.state.services = build_services(document_store)

    application.add_middleware(AuthMiddleware, auth_provider=auth_provider)
    register_exception_handlers(application)

    for router in _ROUTERS:
        application.include_router(router)

    @application.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @application.get("/version")
    async def version() -> dict[str, Any]:
        return {"version": APP_VERSION}

    return application


app = create_app()
