"""Database engine, session factory and request-scoped session dependency."""

import logging
from typing import Any, Generator

from fastapi import HTTPException, Request, status
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from asset_inventory.core.exceptions import StorageError

logger = logging.getLogger(__name__)

# Base class for declarative models
Base = declarative_base()


def create_db_engine(database_url: str, pool_size: int = 10, max_overflow: int = 20) -> Engine:
    """Create the SQLAlchemy engine for the given URL.

    PostgreSQL gets a sized connection pool. SQLite gets a thread-shareable
    connection, and an in-memory SQLite database is pinned to a single
    connection so every session sees the same data.

    Args:
        database_url: SQLAlchemy database URL
        pool_size: Number of connections to maintain (ignored for SQLite)
        max_overflow: Maximum number of connections beyond pool_size (ignored for SQLite)

    Returns:
        Engine: Configured SQLAlchemy engine
    """
    engine_kwargs: dict[str, Any] = {
        "pool_pre_ping": True,  # Verify connections before using
        "echo": False,
    }

    if database_url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs["pool_size"] = pool_size
        engine_kwargs["max_overflow"] = max_overflow

    return create_engine(database_url, **engine_kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to the engine."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )


def check_connection(engine: Engine) -> None:
    """Run a trivial query to prove the database is reachable.

    Raises:
        StorageError: If the database cannot be reached
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database connection test failed: {e}")
        raise StorageError("Database connection failed") from e
    logger.info("Database connection test passed")


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency for getting database session.

    The session factory is created once in the application lifespan and kept
    on ``app.state``; each request gets its own session which is always closed.

    Yields:
        Session: SQLAlchemy database session

    Raises:
        HTTPException: 503 if the application lifespan has not set up the database

    Example:
        ```python
        from asset_inventory.database import get_db

        @app.get("/items")
        def get_items(db: Session = Depends(get_db)):
            return db.query(Item).all()
        ```
    """
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        logger.error("Request received before the database session factory was initialised")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Database is not initialised")

    db = session_factory()
    try:
        yield db
    finally:
        db.close()
