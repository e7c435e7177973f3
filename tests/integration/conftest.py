"""Fixtures for SQL repository tests.

Runs the real SQLAlchemy repositories against an in-memory SQLite database
created from the table metadata, so no database server is needed.
"""

from datetime import datetime

import pytest_asyncio
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from showtalk.persistence.database import create_session_factory
from showtalk.persistence.tables import metadata, reaction_types_table, users_table


@pytest_asyncio.fixture
async def sqlite_session():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    session_factory = create_session_factory(engine)
    async with session_factory() as session:
        await session.execute(
            insert(users_table),
            [
                {"id": "user_a", "username": "alice", "created_at": datetime.now()},
                {"id": "user_b", "username": "bob", "created_at": datetime.now()},
            ],
        )
        await session.execute(
            insert(reaction_types_table),
            [
                {"name": "slay", "emoji": "💅", "category": "positive"},
                {"name": "tea", "emoji": "☕", "category": "emotional"},
            ],
        )
        yield session

    await engine.dispose()
