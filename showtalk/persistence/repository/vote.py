"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from showtalk.domain.model import Vote
from showtalk.domain.repository import VoteRepository
from showtalk.domain.value import CommentId, UserId, VoteValue
from showtalk.persistence.database import storage_errors
from showtalk.persistence.mappers import row_to_vote
from showtalk.persistence.tables import discussion_comment_votes_table

votes = discussion_comment_votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _user_vote_clause(self, user_id: UserId, comment_id: CommentId):
        return and_(votes.c.user_id == user_id, votes.c.comment_id == comment_id)

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment."""
        stmt = select(votes).where(self._user_vote_clause(user_id, comment_id))
        with storage_errors("find_vote"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_comment(self, comment_id: CommentId) -> List[Vote]:
        """Find all votes on a comment."""
        stmt = select(votes).where(votes.c.comment_id == comment_id).order_by(votes.c.id)
        with storage_errors("find_votes_by_comment"):
            result = await self.session.execute(stmt)
            return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def upsert(
        self, user_id: UserId, comment_id: CommentId, value: VoteValue
    ) -> Vote:
        """Insert the vote, or flip the direction of the existing one.

        A concurrent insert for the same (comment, user) trips the unique
        constraint and surfaces as PersistenceError.
        """
        with storage_errors("upsert_vote"):
            existing = await self.find_by_user_and_comment(user_id, comment_id)
            if existing is None:
                stmt = (
                    insert(votes)
                    .values(
                        comment_id=comment_id,
                        user_id=user_id,
                        value=value.value,
                        created_at=datetime.now(),
                    )
                    .returning(votes)
                )
            else:
                stmt = (
                    update(votes)
                    .where(votes.c.id == existing.id)
                    .values(value=value.value)
                    .returning(votes)
                )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
        return row_to_vote(row._asdict())

    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's vote on a comment."""
        stmt = delete(votes).where(self._user_vote_clause(user_id, comment_id))
        with storage_errors("delete_vote"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount > 0
