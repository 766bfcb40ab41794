"""FastAPI entrypoint and HTTP routes."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from fastapi import APIRouter, FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from style_advisor import __version__
from style_advisor.api.context import AppContext
from style_advisor.api.routes import assets, auth, history, outfits
from style_advisor.config.settings import Settings, get_settings
from style_advisor.metrics.prometheus_exporter import render_latest
from style_advisor.monitoring.logging import configure_logging
from style_advisor.services.catalog import CatalogSource
from style_advisor.services.errors import StyleAdvisorError

API_PREFIX = "/api"

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    fields = [".".join(str(part) for part in error.get("loc", ())[1:]) for error in exc.errors()]
    fields = [field for field in fields if field]
    if fields:
        return f"Invalid request: {', '.join(fields)}."
    return "Invalid request."


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StyleAdvisorError)
    async def handle_domain_error(_request: Request, exc: StyleAdvisorError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(_request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _validation_message(exc)},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def _system_router() -> APIRouter:
    router = APIRouter(tags=["system"])

    @router.get("/health")
    async def health_check() -> dict[str, str]:
        """Simple health endpoint used for readiness probes."""

        return {"status": "ok", "time": datetime.now(timezone.utc).isoformat()}

    @router.get("/metrics")
    async def metrics() -> Response:
        body, content_type = render_latest()
        return Response(content=body, media_type=content_type)

    return router


def create_app(settings: Settings | None = None, catalog: CatalogSource | None = None) -> FastAPI:
    """Initialise the FastAPI application with fresh in-memory stores."""

    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Style Advisor API",
        version=__version__,
        docs_url="/docs" if settings.environment != "prod" else None,
        redoc_url="/redoc" if settings.environment != "prod" else None,
    )
    app.state.context = AppContext.build(settings, catalog)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_error_handlers(app)

    for router in (auth.router, outfits.router, history.router, assets.router, _system_router()):
        app.include_router(router, prefix=API_PREFIX)

    assets_root = Path(settings.assets_root)
    if assets_root.is_dir():
        app.mount(settings.images_url_prefix, StaticFiles(directory=assets_root), name="images")
    else:
        logger.warning("Assets directory %s is missing; images will not be served.", assets_root)

    return app
