"""
Authentication Service - user registration, login and session tokens
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import Optional
import logging

from .cache import RedisCache
from .config import Settings, settings as default_settings
from .db import Database
from .errors import AuthServiceError
from .routes import user

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


async def auth_service_error_handler(request: Request, exc: AuthServiceError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error("%s on %s %s: %s", exc.__class__.__name__, request.method, request.url.path, exc.detail)
    return JSONResponse(
        status_code=exc.http_status,
        content={"status_code": 1, "status_msg": exc.public_message},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected request parameters on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"status_code": 1, "status_msg": "invalid request parameters"},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Build the database and cache clients on startup, release them on shutdown"""
        database = Database(
            settings.DATABASE_URL,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
        )
        database.init_db()
        app.state.database = database

        cache = None
        if settings.REDIS_URL:
            cache = RedisCache(settings.REDIS_URL, pool_size=settings.REDIS_POOL_SIZE)
            cache.connect()
        app.state.cache = cache

        try:
            yield
        finally:
            if cache is not None:
                cache.close()
            database.close()

    app = FastAPI(
        title="Auth Service",
        description="User registration, login and session tokens",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AuthServiceError, auth_service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(user.router)

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "service": "Auth Service",
            "version": "1.0.0",
            "status": "running"
        }

    return app


app = create_app()
