import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from companies_api.api.routes.catalog import router as catalog_router
from companies_api.api.routes.companies import API_PREFIX, router as companies_router
from companies_api.api.routes.health import router as health_router
from companies_api.core.config import Settings, get_settings
from companies_api.core.errors import register_exception_handlers
from companies_api.core.logging_config import setup_logging
from companies_api.crud.companies import CompanyRegistry
from companies_api.scheduler import ResetScheduler, init_scheduler

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, registry: Optional[CompanyRegistry] = None) -> FastAPI:
    """
    Build the app around one registry. Tests pass their own settings
    and registry to get isolated instances.
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    # The catalog routes serve the hand-written document instead
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        debug=settings.DEBUG,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    if registry is None:
        registry = CompanyRegistry(accept_empty_values=settings.ACCEPT_EMPTY_PATCH_VALUES)
    app.state.registry = registry
    app.state.reset_scheduler = None

    allowed_origins = settings.cors_origins_list
    if allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allowed_origins,
            allow_credentials=False,
            allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS", "HEAD"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    app.include_router(health_router, tags=["health"])
    app.include_router(companies_router, prefix=API_PREFIX)
    app.include_router(catalog_router, prefix=API_PREFIX)

    if settings.RESET_ENABLED:
        app.state.reset_scheduler = ResetScheduler(registry, settings.RESET_INTERVAL_MS)
        init_scheduler(app, app.state.reset_scheduler)

    @app.on_event("startup")
    def _announce() -> None:
        base = f"http://localhost:{settings.PORT}"
        logger.info("[app] server running at %s", base)
        logger.info("[app] swagger docs at %s%s/metadata-catalog/companies", base, API_PREFIX)
        if allowed_origins:
            logger.info("[CORS] allow_origins = %s", allowed_origins)

    return app


app = create_app()
