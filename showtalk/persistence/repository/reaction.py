"""PostgreSQL implementation of Reaction repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from showtalk.domain.model import Reaction, ReactionType
from showtalk.domain.repository import ReactionRepository
from showtalk.domain.value import CommentId, ReactionTypeId, UserId
from showtalk.persistence.database import storage_errors
from showtalk.persistence.mappers import row_to_reaction, row_to_reaction_type
from showtalk.persistence.tables import (
    discussion_comment_reactions_table,
    reaction_types_table,
)

reactions = discussion_comment_reactions_table


class PostgresReactionRepository(ReactionRepository):
    """PostgreSQL implementation of ReactionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _select_with_type(self):
        return select(
            reactions,
            reaction_types_table.c.name.label("type_name"),
            reaction_types_table.c.emoji.label("type_emoji"),
            reaction_types_table.c.category.label("type_category"),
        ).select_from(
            reactions.join(
                reaction_types_table,
                reaction_types_table.c.id == reactions.c.reaction_type_id,
            )
        )

    def _reaction_clause(
        self,
        comment_id: CommentId,
        user_id: UserId,
        reaction_type_id: ReactionTypeId,
    ):
        return and_(
            reactions.c.comment_id == comment_id,
            reactions.c.user_id == user_id,
            reactions.c.reaction_type_id == reaction_type_id,
        )

    async def find_type(self, reaction_type_id: ReactionTypeId) -> Optional[ReactionType]:
        """Find a reaction type by ID."""
        stmt = select(reaction_types_table).where(
            reaction_types_table.c.id == reaction_type_id
        )
        with storage_errors("find_reaction_type"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_reaction_type(row._asdict()) if row else None

    async def list_types(self) -> List[ReactionType]:
        """List all reaction types."""
        stmt = select(reaction_types_table).order_by(reaction_types_table.c.id)
        with storage_errors("list_reaction_types"):
            result = await self.session.execute(stmt)
            return [row_to_reaction_type(row._asdict()) for row in result.fetchall()]

    async def find(
        self,
        comment_id: CommentId,
        user_id: UserId,
        reaction_type_id: ReactionTypeId,
    ) -> Optional[Reaction]:
        """Find a specific reaction."""
        stmt = self._select_with_type().where(
            self._reaction_clause(comment_id, user_id, reaction_type_id)
        )
        with storage_errors("find_reaction"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_reaction(row._asdict()) if row else None

    async def find_by_comment(self, comment_id: CommentId) -> List[Reaction]:
        """Find all reactions on a comment."""
        stmt = (
            self._select_with_type()
            .where(reactions.c.comment_id == comment_id)
            .order_by(reactions.c.id)
        )
        with storage_errors("find_reactions_by_comment"):
            result = await self.session.execute(stmt)
            return [row_to_reaction(row._asdict()) for row in result.fetchall()]

    async def save(
        self,
        comment_id: CommentId,
        user_id: UserId,
        reaction_type: ReactionType,
    ) -> Reaction:
        """Insert a reaction."""
        stmt = (
            insert(reactions)
            .values(
                comment_id=comment_id,
                user_id=user_id,
                reaction_type_id=reaction_type.id,
                created_at=datetime.now(),
            )
            .returning(reactions)
        )
        with storage_errors("save_reaction"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
        return row_to_reaction(row._asdict(), reaction_type)

    async def delete(
        self,
        comment_id: CommentId,
        user_id: UserId,
        reaction_type_id: ReactionTypeId,
    ) -> bool:
        """Delete a reaction."""
        stmt = delete(reactions).where(
            self._reaction_clause(comment_id, user_id, reaction_type_id)
        )
        with storage_errors("delete_reaction"):
            result = await self.session.execute(stmt)
            await self.session.flush()
        return result.rowcount > 0
