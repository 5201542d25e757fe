"""
FastAPI application factory.

Usage:
    DATABASE_URL=postgresql://... uvicorn news_api.main:app

`create_app()` takes an explicitly constructed `Database` so tests can hand
in their own instance; when omitted, one is built from the environment.
Logging is configured once, when this module builds the served `app`.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

import asyncpg
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from news_api.articles import router as articles_router
from news_api.comments import router as comments_router
from news_api.core.config import Settings
from news_api.core.db import Database
from news_api.core.errors import ApiError, classify_error
from news_api.core.logging import configure_logging
from news_api.topics import router as topics_router
from news_api.users import router as users_router

logger = logging.getLogger(__name__)


async def error_response(request: Request, exc: Exception) -> JSONResponse:
    status_code, msg = classify_error(exc)
    return JSONResponse(status_code=status_code, content={"msg": msg})


def _log_request(request: Request, status: int, start: float) -> None:
    duration_ms = round((time.monotonic() - start) * 1000, 1)
    logger.info(
        "method=%s path=%s status=%d duration_ms=%.1f",
        request.method,
        request.url.path,
        status,
        duration_ms,
        extra={
            "method": request.method,
            "path": request.url.path,
            "status": status,
            "duration_ms": duration_ms,
        },
    )


def create_app(database: Database | None = None, settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()

    if database is None:
        database = Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        # Open the pool once per process.
        await database.connect()
        try:
            yield
        finally:
            await database.close()

    app = FastAPI(title="News API", version="1.0.0", lifespan=lifespan)
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.monotonic()
        try:
            response = await call_next(request)
        except Exception:
            # Unhandled errors are answered by ServerErrorMiddleware, outside this one.
            _log_request(request, 500, start)
            raise
        _log_request(request, response.status_code, start)
        return response

    # Every failure goes through the same classification.
    for exc_class in (
        ApiError,
        asyncpg.PostgresError,
        RequestValidationError,
        StarletteHTTPException,
        Exception,
    ):
        app.add_exception_handler(exc_class, error_response)

    app.include_router(topics_router.router, tags=["topics"])
    app.include_router(users_router.router, tags=["users"])
    app.include_router(articles_router.router, tags=["articles"])
    app.include_router(comments_router.router, tags=["comments"])

    @app.get("/health", tags=["meta"])
    def health() -> dict:
        return {"status": "ok"}

    return app


_settings = Settings.from_env()
configure_logging(level=_settings.log_level, fmt=_settings.log_format)

app = create_app(settings=_settings)
