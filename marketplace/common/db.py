"""
Database connection and session management for the marketplace services
"""
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi import Request
from typing import Generator
import logging

logger = logging.getLogger(__name__)

Base = declarative_base()


def _is_sqlite_memory(url) -> bool:
    database = (url.database or "").strip()
    return database in ("", ":memory:") or database.startswith("file::memory:")


def create_db_engine(database_url: str, pool_size: int = 5, max_overflow: int = 10) -> Engine:
    """
    Create the SQLAlchemy engine for a database URL.

    SQLite connections are shared across threads; an in-memory SQLite
    database is pinned to a single connection so every session sees it.
    """
    url = make_url(database_url)
    kwargs = {}
    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if _is_sqlite_memory(url):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_size"] = pool_size
        kwargs["max_overflow"] = max_overflow
    return create_engine(database_url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """
    Create all tables. Called from the service lifespan.
    """
    # Import models to ensure they are registered with Base
    from . import models  # noqa: F401

    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency yielding a session from the application's session factory.

    Yields:
        Session: SQLAlchemy database session
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def check_db_connection(session_factory: sessionmaker) -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection is successful, False otherwise
    """
    try:
        with session_factory() as db:
            db.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection check failed: {e}")
        return False
