"""
Database connection management.

Provides SQLAlchemy engine, session factory, and FastAPI dependency
for database session injection.

Dependencies: sqlalchemy, archdraft.configs
System role: Database connection lifecycle management
"""

from collections.abc import Generator
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from archdraft.boundary.db.base import Base
from archdraft.configs import get_settings


@lru_cache
def get_engine() -> Engine:
    """
    Create SQLAlchemy engine with connection pooling and health checks.

    SQLite connections are shared with worker threads (run_in_threadpool),
    so check_same_thread is disabled and pool sizing is left to SQLAlchemy.

    Returns:
        Engine: Configured SQLAlchemy engine
    """
    db_config = get_settings().database

    if db_config.is_sqlite:
        return create_engine(
            db_config.url,
            echo=db_config.echo_sql,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        db_config.url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,  # Verify connections before using
    )


@lru_cache
def get_session_factory() -> sessionmaker:
    """
    Create session factory for database operations.

    Returns:
        sessionmaker: Session factory with autoflush disabled and
            expire_on_commit disabled so rows stay readable after commit
    """
    return sessionmaker(
        bind=get_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


def create_tables(engine: Engine | None = None) -> None:
    """Create all tables registered on Base.metadata."""
    # Register models on the metadata
    import archdraft.boundary.db.models  # noqa: F401

    Base.metadata.create_all(engine or get_engine())


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency for database session injection with automatic cleanup.

    Yields:
        Session: SQLAlchemy database session (scoped to request lifetime)
    """
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()
