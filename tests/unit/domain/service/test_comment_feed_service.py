"""Unit tests for CommentFeedService (sorting and pagination)."""

from datetime import datetime, timedelta

import pytest

from showtalk.domain.model import CommentDraft
from showtalk.domain.repository import CommentRepository, VoteRepository
from showtalk.domain.service import CommentFeedService, TreeAssembler
from showtalk.domain.value import (
    CommentId,
    DiscussionId,
    SortMode,
    UserId,
    VoteValue,
)
from showtalk.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import cast_votes
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

DISCUSSION = DiscussionId(1)
START = datetime(2026, 3, 1, 9, 0, 0)


async def _comment(repo, content, minutes, parent=None, author="user_author"):
    """Store a comment created `minutes` after START."""
    draft = CommentDraft(
        discussion_id=DISCUSSION,
        author_id=UserId(author),
        content=content,
        parent_id=parent.id if parent else None,
        depth=parent.depth + 1 if parent else 0,
        created_at=START + timedelta(minutes=minutes),
    )
    return await repo.create(draft, parent.path if parent else None)


class TestNewSort:
    """Recency ordering is pushed to the store."""

    @pytest.mark.asyncio
    async def test_newest_first_with_store_pagination(self, unit_env):
        repo = await unit_env.get(CommentRepository)
        feed = await unit_env.get(CommentFeedService)
        first = await _comment(repo, "first", 0)
        second = await _comment(repo, "second", 1)
        third = await _comment(repo, "third", 2)

        page_one = await feed.get_comments(DISCUSSION, limit=2, offset=0)
        page_two = await feed.get_comments(DISCUSSION, limit=2, offset=2)

        assert [c.id for c in page_one] == [third.id, second.id]
        assert [c.id for c in page_two] == [first.id]

    @pytest.mark.asyncio
    async def test_empty_discussion_returns_empty_list(self, unit_env):
        feed = await unit_env.get(CommentFeedService)

        assert await feed.get_comments(DISCUSSION) == []
        assert await feed.get_comments(DISCUSSION, sort=SortMode.BEST) == []


class TestRankedSorts:
    """top and best rank the full level before slicing the page."""

    @pytest.mark.asyncio
    async def test_top_pagination_follows_full_set_order(self, unit_env):
        repo = await unit_env.get(CommentRepository)
        votes = await unit_env.get(VoteRepository)
        feed = await unit_env.get(CommentFeedService)
        # Newest comment has the lowest score, so a per-page sort would differ
        five = await _comment(repo, "five", 0)
        three = await _comment(repo, "three", 1)
        one = await _comment(repo, "one", 2)
        await cast_votes(votes, five.id, upvotes=5)
        await cast_votes(votes, three.id, upvotes=3)
        await cast_votes(votes, one.id, upvotes=1)

        page_one = await feed.get_comments(DISCUSSION, sort=SortMode.TOP, limit=2)
        page_two = await feed.get_comments(
            DISCUSSION, sort=SortMode.TOP, limit=2, offset=2
        )
        shifted = await feed.get_comments(
            DISCUSSION, sort=SortMode.TOP, limit=2, offset=1
        )

        assert [c.score for c in page_one] == [5, 3]
        assert [c.score for c in page_two] == [1]
        assert [c.score for c in shifted] == [3, 1]

    @pytest.mark.asyncio
    async def test_extra_upvote_never_lowers_rank(self, unit_env):
        repo = await unit_env.get(CommentRepository)
        votes = await unit_env.get(VoteRepository)
        feed = await unit_env.get(CommentFeedService)
        a = await _comment(repo, "a", 0)
        b = await _comment(repo, "b", 1)
        c = await _comment(repo, "c", 2)
        await cast_votes(votes, a.id, upvotes=2)
        await cast_votes(votes, b.id, upvotes=2)
        await cast_votes(votes, c.id, upvotes=1)

        before = await feed.get_comments(DISCUSSION, sort=SortMode.TOP, limit=2)
        assert c.id not in [x.id for x in before]

        await votes.upsert(UserId("late_voter_1"), c.id, VoteValue.UPVOTE)
        await votes.upsert(UserId("late_voter_2"), c.id, VoteValue.UPVOTE)
        after = await feed.get_comments(DISCUSSION, sort=SortMode.TOP, limit=2)

        assert after[0].id == c.id
        assert after[0].score == 3

    @pytest.mark.asyncio
    async def test_ties_break_by_id_ascending(self, unit_env):
        repo = await unit_env.get(CommentRepository)
        feed = await unit_env.get(CommentFeedService)
        ids = [(await _comment(repo, f"c{i}", i)).id for i in range(4)]

        first = await feed.get_comments(DISCUSSION, sort=SortMode.TOP)
        second = await feed.get_comments(DISCUSSION, sort=SortMode.TOP)

        assert [c.id for c in first] == sorted(ids)
        assert [c.id for c in first] == [c.id for c in second]

    @pytest.mark.asyncio
    async def test_best_prefers_confidence_over_ratio(self, unit_env):
        repo = await unit_env.get(CommentRepository)
        votes = await unit_env.get(VoteRepository)
        feed = await unit_env.get(CommentFeedService)
        lucky = await _comment(repo, "one lucky upvote", 0)
        solid = await _comment(repo, "broadly liked", 1)
        await cast_votes(votes, lucky.id, upvotes=1)
        await cast_votes(votes, solid.id, upvotes=40, downvotes=5)

        top = await feed.get_comments(DISCUSSION, sort=SortMode.BEST)

        assert [c.id for c in top] == [solid.id, lucky.id]

    @pytest.mark.asyncio
    async def test_ceiling_limits_candidates(self):
        """Past the ceiling, ranking covers only the fetched candidates."""
        repo = InMemoryCommentRepository()
        feed = CommentFeedService(repo, TreeAssembler(), ranking_candidate_limit=2)
        for i in range(3):
            await _comment(repo, f"c{i}", i)

        ranked = await feed.get_comments(DISCUSSION, sort=SortMode.TOP, limit=10)

        assert len(ranked) == 2


class TestReplies:
    """Replies are nested below the page, bounded by max_depth."""

    @pytest.mark.asyncio
    async def test_example_thread(self, unit_env):
        """A(3 up/1 down) with reply B(1 up), C(0 up/2 down) sorted by top."""
        repo = await unit_env.get(CommentRepository)
        votes = await unit_env.get(VoteRepository)
        feed = await unit_env.get(CommentFeedService)
        a = await _comment(repo, "A", 0)
        b = await _comment(repo, "B", 1, parent=a)
        c = await _comment(repo, "C", 2)
        await cast_votes(votes, a.id, upvotes=3, downvotes=1)
        await cast_votes(votes, b.id, upvotes=1)
        await cast_votes(votes, c.id, downvotes=2)

        result = await feed.get_comments(
            DISCUSSION, sort=SortMode.TOP, limit=10, offset=0
        )

        assert [(x.id, x.score) for x in result] == [(a.id, 2), (c.id, -2)]
        assert [r.id for r in result[0].replies] == [b.id]
        assert result[0].replies[0].score == 1
        assert result[1].replies == []

    @pytest.mark.asyncio
    async def test_max_depth_bounds_nesting(self, unit_env):
        repo = await unit_env.get(CommentRepository)
        feed = await unit_env.get(CommentFeedService)
        root = await _comment(repo, "root", 0)
        child = await _comment(repo, "child", 1, parent=root)
        grandchild = await _comment(repo, "grandchild", 2, parent=child)
        await _comment(repo, "great-grandchild", 3, parent=grandchild)

        shallow = await feed.get_comments(DISCUSSION, max_depth=1)
        deeper = await feed.get_comments(DISCUSSION, max_depth=2)
        flat = await feed.get_comments(DISCUSSION, max_depth=0)

        assert shallow[0].replies[0].id == child.id
        assert shallow[0].replies[0].replies == []
        assert deeper[0].replies[0].replies[0].id == grandchild.id
        assert deeper[0].replies[0].replies[0].replies == []
        assert flat[0].replies == []

    @pytest.mark.asyncio
    async def test_only_page_comments_get_replies(self, unit_env):
        repo = await unit_env.get(CommentRepository)
        feed = await unit_env.get(CommentFeedService)
        old = await _comment(repo, "old", 0)
        await _comment(repo, "reply to old", 5, parent=old)
        new = await _comment(repo, "new", 1)

        page = await feed.get_comments(DISCUSSION, limit=1)

        assert [c.id for c in page] == [new.id]
        assert page[0].replies == []

    @pytest.mark.asyncio
    async def test_lists_a_reply_level(self, unit_env):
        repo = await unit_env.get(CommentRepository)
        feed = await unit_env.get(CommentFeedService)
        root = await _comment(repo, "root", 0)
        first = await _comment(repo, "first reply", 1, parent=root)
        second = await _comment(repo, "second reply", 2, parent=root)

        level = await feed.get_comments(DISCUSSION, parent_id=CommentId(root.id))

        assert [c.id for c in level] == [second.id, first.id]


class TestGetThread:
    @pytest.mark.asyncio
    async def test_whole_thread_in_path_order(self, unit_env):
        repo = await unit_env.get(CommentRepository)
        feed = await unit_env.get(CommentFeedService)
        a = await _comment(repo, "A", 0)
        b = await _comment(repo, "B", 1)
        a1 = await _comment(repo, "A1", 2, parent=a)
        a1x = await _comment(repo, "A1x", 3, parent=a1)

        tree = await feed.get_thread(DISCUSSION)

        assert [c.id for c in tree] == [a.id, b.id]
        assert tree[0].replies[0].id == a1.id
        assert tree[0].replies[0].replies[0].id == a1x.id
