"""FastAPI application for the neuro scoring engine."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from neuro_score import __version__
from neuro_score.api.middleware import APIKeyMiddleware, RequestLoggingMiddleware
from neuro_score.api.routes import health, neuro_tests, results
from neuro_score.config import get_settings
from neuro_score.core.database import close_db, init_db
from neuro_score.exceptions import ImmutableResultError, UnknownTestError
from neuro_score.registry import load_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Validate the normative data and create tables before serving."""
    logger.info("Starting neuro-score API")
    load_registry()
    await init_db()
    yield
    await close_db()
    logger.info("Shutting down neuro-score API")


def create_app(init_database: bool = True) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Neuro Score API",
        description="Normative scoring of neuropsychological tests",
        version=__version__,
        lifespan=lifespan if init_database else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    if settings.api_key:
        app.add_middleware(APIKeyMiddleware, api_key=settings.api_key)

    app.include_router(health.router, tags=["health"])
    app.include_router(neuro_tests.router, prefix="/api/v1")
    app.include_router(results.router, prefix="/api/v1")

    @app.exception_handler(UnknownTestError)
    async def unknown_test_handler(request: Request, exc: UnknownTestError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ImmutableResultError)
    async def immutable_result_handler(request: Request, exc: ImmutableResultError):
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception: %s", exc)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": str(exc) if settings.debug_mode else None,
            },
        )

    return app
