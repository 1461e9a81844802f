"""FastAPI application entry point"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from filmly import __version__
from filmly.api import auth, favorites, genres, health, movies
from filmly.config import DEFAULT_JWT_SECRET, settings
from filmly.errors import register_exception_handlers
from filmly.store import FilmStore
from filmly.utils.logger import logger, setup_logging

# Setup logging
setup_logging(settings.LOG_LEVEL)


def create_app(store: Optional[FilmStore] = None) -> FastAPI:
    """Build the application around ``store`` (a freshly seeded one by default)."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler"""
        logger.info("Filmly API starting up", extra={"action": "startup"})
        if settings.JWT_SECRET == DEFAULT_JWT_SECRET:
            logger.warning("JWT_SECRET is the development default; set it before deploying")
        yield
        logger.info("Filmly API shutting down", extra={"action": "shutdown"})

    app = FastAPI(
        title="Filmly API",
        description="Movie catalog, genres and favorites behind bearer-token auth",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.store = store or FilmStore()

    # ===== Middleware Setup =====

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.METRICS_ENABLED:
        from filmly.middleware.monitoring import MonitoringMiddleware
        app.add_middleware(MonitoringMiddleware)

        instrumentator = Instrumentator(
            should_group_status_codes=True,
            should_ignore_untemplated=True,
            excluded_handlers=[settings.METRICS_PATH, f"{settings.API_PREFIX}/health"],
        )
        instrumentator.instrument(app)
        instrumentator.expose(app, endpoint=settings.METRICS_PATH, include_in_schema=False)

    # ===== Route Setup =====

    for module in (health, auth, genres, movies, favorites):
        app.include_router(module.router, prefix=settings.API_PREFIX)

    register_exception_handlers(app)
    return app


app = create_app()
