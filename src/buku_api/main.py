import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from buku_api.api.errors import register_exception_handlers
from buku_api.api.routes.buku import router as buku_router
from buku_api.api.routes.root import router as root_router
from buku_api.config import Settings, settings
from buku_api.context import AppContext
from buku_api.database import Base, build_engine, build_session_factory
from buku_api.logging_config import configure_logging
from buku_api.middleware import RequestContextMiddleware
from buku_api.models import Buku, Penulis  # noqa: F401

logger = logging.getLogger(__name__)


def build_context(app_settings: Settings) -> AppContext:
    engine = build_engine(app_settings.database_url)
    return AppContext(
        settings=app_settings,
        engine=engine,
        session_factory=build_session_factory(engine),
    )


def create_app(
    app_settings: Settings | None = None, context: AppContext | None = None
) -> FastAPI:
    """
    Builds the FastAPI application.

    The AppContext is created once here and exposed to handlers through
    `app.state.context`; pass one in to share an engine (e.g. in tests).
    """
    owns_context = context is None
    app_context = context or build_context(app_settings or settings)
    cfg = app_context.settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Starting %s", cfg.app_name)
        if cfg.create_schema:
            Base.metadata.create_all(app_context.engine)
        yield
        if owns_context:
            app_context.dispose()
        logger.info("Stopped %s", cfg.app_name)

    app = FastAPI(
        title=cfg.app_name,
        description=cfg.app_description,
        version=cfg.app_version,
        lifespan=lifespan,
    )
    app.state.context = app_context

    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app, debug=cfg.debug)

    app.include_router(root_router)
    app.include_router(buku_router)
    return app


configure_logging(
    level=settings.log_level,
    output_format=settings.log_format,
    service_name=settings.log_service_name,
)
app = create_app()
logger.info("Application bootstrapped")
