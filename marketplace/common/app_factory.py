"""
Shared FastAPI application assembly for the database-backed services.
"""
from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from .config import Settings
from .db import create_db_engine, create_session_factory, init_db
from .errors import register_exception_handlers
from .health import router as health_router
from .logging_config import configure_logging
from .tokens import TokenService

logger = logging.getLogger(__name__)


def build_service_app(title: str, settings: Settings, engine: Optional[Engine] = None) -> FastAPI:
    """
    Create a service application with its engine, session factory and
    token service attached to ``app.state``.

    Callers add their own routers and service objects on top.
    """
    configure_logging(settings)

    if engine is None:
        engine = create_db_engine(
            settings.DATABASE_URL,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
        )

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        """Initialize database on startup"""
        init_db(engine)
        logger.info(f"{title} started")
        yield

    app = FastAPI(title=title, version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Authorization"],
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.tokens = TokenService.from_settings(settings)

    register_exception_handlers(app)
    app.include_router(health_router)
    return app
