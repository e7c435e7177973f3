"""Database connection and session management.

Sessions are opened per request by the persistence provider; the request
session's transaction spans every write a use case makes.
"""

from contextlib import contextmanager
from typing import Any, Iterator

import logfire
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from showtalk.config import Settings
from showtalk.domain.error import PersistenceError


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Pool sizing applies to server databases only; SQLite engines keep
    SQLAlchemy's default pool.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    options: dict[str, Any] = {
        "echo": settings.debug,
        "pool_pre_ping": True,
    }
    if not settings.database_url.startswith("sqlite"):
        options["pool_size"] = settings.database.pool_size
        options["max_overflow"] = settings.database.max_overflow
    return create_async_engine(settings.database_url, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Objects stay readable after commit and nothing is flushed implicitly.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Translate SQLAlchemy failures into PersistenceError.

    Args:
        operation: Name of the repository operation, for logs
    """
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error("Storage operation failed", operation=operation, error=str(e))
        raise PersistenceError(f"{operation} failed: {e}") from e
