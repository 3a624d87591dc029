# flowershop/services/api/app.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from flowershop.common.logging import get_logger
from flowershop.common.settings import get_settings
from flowershop.database.core.main import StoreHandle
from flowershop.domain.errors import BackendUnavailable, InvalidInput, StoredDataError
from flowershop.services.api.routers import bouquets, categories, colors, flowers, health, media, tags

cfg = get_settings()
dev = cfg.app_env.lower() == "development"
logger = get_logger(__name__)


def _invalid_input(request: Request, exc: InvalidInput) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    body = {"detail": exc.message}
    if exc.field:
        body["field"] = exc.field
    return JSONResponse(status_code=HTTPStatus.BAD_REQUEST, content=body)


def _backend_unavailable(request: Request, exc: BackendUnavailable) -> JSONResponse:
    # details were logged where the store error was translated
    logger.error("%s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def _stored_data_error(request: Request, exc: StoredDataError) -> JSONResponse:
    logger.error("%s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(store: StoreHandle | None = None) -> FastAPI:
    app = FastAPI(
        title="Flowershop Catalog API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )
    app.state.store = store

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    app.add_exception_handler(InvalidInput, _invalid_input)
    app.add_exception_handler(BackendUnavailable, _backend_unavailable)
    app.add_exception_handler(StoredDataError, _stored_data_error)

    # Routers
    app.include_router(health.router)
    app.include_router(categories.router)
    app.include_router(flowers.router)
    app.include_router(bouquets.router)
    app.include_router(tags.router)
    app.include_router(colors.router)
    app.include_router(media.router)
    return app


app = create_app()
