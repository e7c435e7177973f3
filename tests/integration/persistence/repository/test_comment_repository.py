"""Integration tests for PostgresCommentRepository.

These tests run the SQL statements against SQLite to verify the two-phase
create, path-prefix reply lookups and batched vote/reaction loading.
"""

from datetime import datetime, timedelta

import pytest
from sqlalchemy import select

from showtalk.domain.model import CommentDraft
from showtalk.domain.value import CommentId, DiscussionId, UserId, VoteValue
from showtalk.persistence.repository import (
    PostgresCommentRepository,
    PostgresReactionRepository,
    PostgresVoteRepository,
)
from showtalk.persistence.tables import PLACEHOLDER_PATH, discussion_comments_table

START = datetime(2026, 5, 1, 20, 0, 0)


async def _create(repo, content, minutes=0, parent=None, discussion=1, author="user_a"):
    draft = CommentDraft(
        discussion_id=DiscussionId(discussion),
        author_id=UserId(author),
        content=content,
        parent_id=parent.id if parent else None,
        depth=parent.depth + 1 if parent else 0,
        created_at=START + timedelta(minutes=minutes),
    )
    return await repo.create(draft, parent.path if parent else None)


class TestCreate:
    """Tests for the two-phase insert."""

    @pytest.mark.asyncio
    async def test_root_and_reply_paths(self, sqlite_session):
        repo = PostgresCommentRepository(sqlite_session)

        root = await _create(repo, "root")
        reply = await _create(repo, "reply", parent=root, author="user_b")

        assert str(root.path) == f"{root.id:06d}"
        assert str(reply.path) == f"{root.path}.{reply.id:06d}"
        assert reply.depth == 1
        assert root.author_username == "alice"
        assert reply.author_username == "bob"

    @pytest.mark.asyncio
    async def test_no_placeholder_path_left_behind(self, sqlite_session):
        repo = PostgresCommentRepository(sqlite_session)
        await _create(repo, "a")
        await _create(repo, "b")

        result = await sqlite_session.execute(
            select(discussion_comments_table.c.path).where(
                discussion_comments_table.c.path == PLACEHOLDER_PATH
            )
        )

        assert result.fetchall() == []

    @pytest.mark.asyncio
    async def test_unknown_author_has_no_username(self, sqlite_session):
        repo = PostgresCommentRepository(sqlite_session)

        record = await _create(repo, "who dis", author="user_unknown")

        assert record.author_username is None


class TestFindLevel:
    @pytest.mark.asyncio
    async def test_newest_first_with_limit_offset(self, sqlite_session):
        repo = PostgresCommentRepository(sqlite_session)
        first = await _create(repo, "first", minutes=0)
        second = await _create(repo, "second", minutes=1)
        third = await _create(repo, "third", minutes=2)
        await _create(repo, "reply", minutes=3, parent=first)
        await _create(repo, "other discussion", minutes=4, discussion=2)

        page_one = await repo.find_level(DiscussionId(1), limit=2, offset=0)
        page_two = await repo.find_level(DiscussionId(1), limit=2, offset=2)

        assert [c.id for c in page_one] == [third.id, second.id]
        assert [c.id for c in page_two] == [first.id]
        assert page_two[0].reply_count == 1

    @pytest.mark.asyncio
    async def test_reply_level(self, sqlite_session):
        repo = PostgresCommentRepository(sqlite_session)
        root = await _create(repo, "root")
        reply = await _create(repo, "reply", minutes=1, parent=root)

        level = await repo.find_level(DiscussionId(1), parent_id=root.id)

        assert [c.id for c in level] == [reply.id]

    @pytest.mark.asyncio
    async def test_loads_votes_and_reactions(self, sqlite_session):
        repo = PostgresCommentRepository(sqlite_session)
        votes = PostgresVoteRepository(sqlite_session)
        reactions = PostgresReactionRepository(sqlite_session)
        comment = await _create(repo, "voted")
        await votes.upsert(UserId("user_a"), comment.id, VoteValue.UPVOTE)
        await votes.upsert(UserId("user_b"), comment.id, VoteValue.DOWNVOTE)
        slay = (await reactions.list_types())[0]
        await reactions.save(comment.id, UserId("user_b"), slay)

        [record] = await repo.find_level(DiscussionId(1))

        assert sorted(v.value for v in record.votes) == [
            VoteValue.DOWNVOTE,
            VoteValue.UPVOTE,
        ]
        assert [r.reaction_type.name for r in record.reactions] == ["slay"]


class TestFindReplies:
    """Tests for path-prefix descendant lookups."""

    @pytest.mark.asyncio
    async def test_bounded_by_depth_and_in_path_order(self, sqlite_session):
        repo = PostgresCommentRepository(sqlite_session)
        a = await _create(repo, "a")
        b = await _create(repo, "b", minutes=1)
        a1 = await _create(repo, "a1", minutes=2, parent=a)
        b1 = await _create(repo, "b1", minutes=3, parent=b)
        a2 = await _create(repo, "a2", minutes=4, parent=a)
        a1x = await _create(repo, "a1x", minutes=5, parent=a1)

        one_level = await repo.find_replies([a, b], max_depth=1)
        two_levels = await repo.find_replies([a], max_depth=2)

        assert [c.id for c in one_level] == [a1.id, a2.id, b1.id]
        assert [c.id for c in two_levels] == [a1.id, a1x.id, a2.id]

    @pytest.mark.asyncio
    async def test_no_ancestors(self, sqlite_session):
        repo = PostgresCommentRepository(sqlite_session)

        assert await repo.find_replies([], max_depth=3) == []


class TestFindByDiscussion:
    @pytest.mark.asyncio
    async def test_tree_order(self, sqlite_session):
        repo = PostgresCommentRepository(sqlite_session)
        a = await _create(repo, "a")
        b = await _create(repo, "b", minutes=1)
        a1 = await _create(repo, "a1", minutes=2, parent=a)

        records = await repo.find_by_discussion(DiscussionId(1))

        assert [c.id for c in records] == [a.id, a1.id, b.id]


class TestSoftDeleteAndStats:
    @pytest.mark.asyncio
    async def test_soft_delete(self, sqlite_session):
        repo = PostgresCommentRepository(sqlite_session)
        comment = await _create(repo, "bye")

        deleted = await repo.soft_delete(comment.id)

        assert deleted.is_deleted is True
        assert (await repo.find_by_id(comment.id)).is_deleted is True
        assert await repo.soft_delete(CommentId(9999)) is None

    @pytest.mark.asyncio
    async def test_stats(self, sqlite_session):
        repo = PostgresCommentRepository(sqlite_session)
        a = await _create(repo, "a")
        a1 = await _create(repo, "a1", parent=a)
        await _create(repo, "a1x", parent=a1)
        await _create(repo, "b")

        stats = await repo.get_stats(DiscussionId(1))
        empty = await repo.get_stats(DiscussionId(2))

        assert (stats.total_comments, stats.top_level_comments, stats.max_depth) == (
            4,
            2,
            2,
        )
        assert (empty.total_comments, empty.top_level_comments, empty.max_depth) == (
            0,
            0,
            0,
        )
