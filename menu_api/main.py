from __future__ import annotations

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from menu_api.api.menu import router as menu_router
from menu_api.api.metrics import router as metrics_router
from menu_api.config import Settings, get_settings
from menu_api.core.errors import INTERNAL_ERROR_MESSAGE, ApiError, NotFoundError, ValidationFailed, error_response
from menu_api.models.schemas import FieldError, HealthResponse
from menu_api.observability.logging import configure_logging
from menu_api.observability.metrics import HitCounter
from menu_api.observability.middleware import RequestContextMiddleware
from menu_api.services.menu_store import MenuStore

logger = structlog.get_logger(__name__)


def _request_target(request: Request) -> str:
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(request, exc)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown paths and unsupported methods on known paths both read as a missing route.
    if exc.status_code in (404, 405):
        return error_response(request, NotFoundError(f"Route {request.method} {_request_target(request)} not found."))
    # Anything else the framework rejects is either bad client input or our fault.
    if exc.status_code < 500:
        return error_response(request, ValidationFailed([FieldError(field="request", msg=str(exc.detail))]))
    logger.error("http_exception", status_code=exc.status_code, detail=str(exc.detail))
    return error_response(request, ApiError(INTERNAL_ERROR_MESSAGE))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = []
    for err in exc.errors():
        if err.get("type") == "json_invalid":
            details.append(FieldError(field="body", msg="request body must be valid JSON"))
            continue
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "path", "query")]
        details.append(FieldError(field=".".join(loc) or "body", msg=err.get("msg", "invalid value")))
    logger.warning("request_validation_failed", fields=[detail.field for detail in details])
    return error_response(request, ValidationFailed(details))


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build an app with its own menu store and hit counter."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    store = MenuStore.seeded() if settings.seed_menu else MenuStore()
    hits = HitCounter()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("startup", app_name=settings.app_name, port=settings.port, menu_items=len(store))
        yield

    app = FastAPI(title=settings.app_name, version="1.0.0", lifespan=lifespan, redirect_slashes=False)
    app.state.settings = settings
    app.state.menu_store = store
    app.state.hit_counter = hits

    app.add_middleware(RequestContextMiddleware, hits=hits)
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(menu_router)
    app.include_router(metrics_router)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    return app


app = create_app()
