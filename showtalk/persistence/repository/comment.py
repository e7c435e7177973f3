"""PostgreSQL implementation of Comment repository."""

from collections import defaultdict
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import and_, case, desc, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from showtalk.domain.model import (
    Comment,
    CommentDraft,
    CommentRecord,
    CommentStats,
    Reaction,
    Vote,
)
from showtalk.domain.repository import CommentRepository
from showtalk.domain.value import CommentId, CommentPath, DiscussionId
from showtalk.persistence.database import storage_errors
from showtalk.persistence.mappers import (
    draft_to_dict,
    row_to_comment,
    row_to_comment_record,
    row_to_reaction,
    row_to_vote,
)
from showtalk.persistence.tables import (
    PLACEHOLDER_PATH,
    discussion_comment_reactions_table,
    discussion_comment_votes_table,
    discussion_comments_table,
    reaction_types_table,
    users_table,
)

comments = discussion_comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _select_with_author(self):
        return select(comments, users_table.c.username).select_from(
            comments.outerjoin(users_table, users_table.c.id == comments.c.user_id)
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        with storage_errors("find_comment_by_id"):
            stmt = select(comments).where(comments.c.id == comment_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def create(
        self, draft: CommentDraft, parent_path: Optional[CommentPath] = None
    ) -> CommentRecord:
        """Insert the comment, then write its path, in the session's transaction.

        The session provider commits at the end of the unit of work, so other
        transactions never see the placeholder path.
        """
        with storage_errors("create_comment"):
            insert_stmt = (
                comments.insert()
                .values(**draft_to_dict(draft, PLACEHOLDER_PATH))
                .returning(comments.c.id)
            )
            result = await self.session.execute(insert_stmt)
            comment_id = CommentId(result.scalar_one())

            path = CommentPath.for_comment(comment_id, parent_path)
            await self.session.execute(
                update(comments).where(comments.c.id == comment_id).values(path=path.root)
            )
            await self.session.flush()

            stmt = self._select_with_author().where(comments.c.id == comment_id)
            row = (await self.session.execute(stmt)).fetchone()
        return row_to_comment_record(row._asdict())

    async def find_level(
        self,
        discussion_id: DiscussionId,
        parent_id: Optional[CommentId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[CommentRecord]:
        """Find one thread level, newest first, paged by the database."""
        if parent_id is None:
            parent_clause = comments.c.parent_id.is_(None)
        else:
            parent_clause = comments.c.parent_id == parent_id

        stmt = (
            self._select_with_author()
            .where(comments.c.discussion_id == discussion_id)
            .where(parent_clause)
            .order_by(desc(comments.c.created_at), desc(comments.c.id))
            .limit(limit)
            .offset(offset)
        )
        with storage_errors("find_comment_level"):
            result = await self.session.execute(stmt)
            return await self._load_records([row._asdict() for row in result.fetchall()])

    async def find_replies(
        self,
        ancestors: Sequence[Comment],
        max_depth: int,
    ) -> List[CommentRecord]:
        """Find descendants of ancestors by path prefix, bounded per ancestor."""
        if not ancestors or max_depth <= 0:
            return []

        subtree_clauses = [
            and_(
                comments.c.path.like(f"{ancestor.path.descendant_prefix}%"),
                comments.c.depth <= ancestor.depth + max_depth,
            )
            for ancestor in ancestors
        ]
        stmt = (
            self._select_with_author()
            .where(or_(*subtree_clauses))
            .order_by(comments.c.path)
        )
        with storage_errors("find_comment_replies"):
            result = await self.session.execute(stmt)
            return await self._load_records([row._asdict() for row in result.fetchall()])

    async def find_by_discussion(
        self, discussion_id: DiscussionId
    ) -> List[CommentRecord]:
        """Find all comments of a discussion in tree order."""
        stmt = (
            self._select_with_author()
            .where(comments.c.discussion_id == discussion_id)
            .order_by(comments.c.path)
        )
        with storage_errors("find_comments_by_discussion"):
            result = await self.session.execute(stmt)
            return await self._load_records([row._asdict() for row in result.fetchall()])

    async def soft_delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Flag a comment as deleted."""
        stmt = (
            update(comments)
            .where(comments.c.id == comment_id)
            .values(is_deleted=True, updated_at=datetime.now())
            .returning(comments)
        )
        with storage_errors("soft_delete_comment"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            if row is None:
                return None
            await self.session.flush()
        return row_to_comment(row._asdict())

    async def get_stats(self, discussion_id: DiscussionId) -> CommentStats:
        """Aggregate counts and maximum depth in one query."""
        stmt = select(
            func.count(comments.c.id),
            func.sum(case((comments.c.parent_id.is_(None), 1), else_=0)),
            func.max(comments.c.depth),
        ).where(comments.c.discussion_id == discussion_id)
        with storage_errors("get_comment_stats"):
            result = await self.session.execute(stmt)
            total, top_level, max_depth = result.one()
        return CommentStats(
            total_comments=total or 0,
            top_level_comments=top_level or 0,
            max_depth=max_depth or 0,
        )

    async def _load_records(self, rows: List[Dict[str, Any]]) -> List[CommentRecord]:
        """Attach votes, reactions and reply counts to comment rows.

        One batched query per association (avoids N+1).
        """
        if not rows:
            return []

        ids = [row["id"] for row in rows]
        votes = await self._votes_for(ids)
        reactions = await self._reactions_for(ids)
        reply_counts = await self._reply_counts_for(ids)

        return [
            row_to_comment_record(
                row,
                votes=votes.get(row["id"], []),
                reactions=reactions.get(row["id"], []),
                reply_count=reply_counts.get(row["id"], 0),
            )
            for row in rows
        ]

    async def _votes_for(self, ids: List[int]) -> Dict[int, List[Vote]]:
        stmt = select(discussion_comment_votes_table).where(
            discussion_comment_votes_table.c.comment_id.in_(ids)
        )
        result = await self.session.execute(stmt)
        by_comment: Dict[int, List[Vote]] = defaultdict(list)
        for row in result.fetchall():
            vote = row_to_vote(row._asdict())
            by_comment[vote.comment_id].append(vote)
        return by_comment

    async def _reactions_for(self, ids: List[int]) -> Dict[int, List[Reaction]]:
        reactions = discussion_comment_reactions_table
        stmt = (
            select(
                reactions,
                reaction_types_table.c.name.label("type_name"),
                reaction_types_table.c.emoji.label("type_emoji"),
                reaction_types_table.c.category.label("type_category"),
            )
            .select_from(
                reactions.join(
                    reaction_types_table,
                    reaction_types_table.c.id == reactions.c.reaction_type_id,
                )
            )
            .where(reactions.c.comment_id.in_(ids))
            .order_by(reactions.c.id)
        )
        result = await self.session.execute(stmt)
        by_comment: Dict[int, List[Reaction]] = defaultdict(list)
        for row in result.fetchall():
            reaction = row_to_reaction(row._asdict())
            by_comment[reaction.comment_id].append(reaction)
        return by_comment

    async def _reply_counts_for(self, ids: List[int]) -> Dict[int, int]:
        stmt = (
            select(comments.c.parent_id, func.count(comments.c.id))
            .where(comments.c.parent_id.in_(ids))
            .group_by(comments.c.parent_id)
        )
        result = await self.session.execute(stmt)
        return {parent_id: count for parent_id, count in result.fetchall()}
