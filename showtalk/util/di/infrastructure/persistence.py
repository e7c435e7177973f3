"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from showtalk.config import Settings
from showtalk.domain.repository import (
    CommentRepository,
    ReactionRepository,
    VoteRepository,
)
from showtalk.persistence.database import create_engine, create_session_factory
from showtalk.persistence.repository import (
    PostgresCommentRepository,
    PostgresReactionRepository,
    PostgresVoteRepository,
)
from showtalk.util.di.base import ProviderBase
from showtalk.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider backed by the SQL repositories."""

    __is_mock__ = False

    comment_repository = provide(
        PostgresCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
    vote_repository = provide(
        PostgresVoteRepository, provides=VoteRepository, scope=Scope.REQUEST
    )
    reaction_repository = provide(
        PostgresReactionRepository, provides=ReactionRepository, scope=Scope.REQUEST
    )

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide the database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide the request session.

        Committed at the end of the request if no exception occurred, rolled
        back otherwise. Both writes of a comment create share this
        transaction, so the placeholder path is never visible to readers.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise
