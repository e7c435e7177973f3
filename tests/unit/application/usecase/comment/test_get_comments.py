"""Unit tests for GetCommentsUseCase."""

import asyncio

import pytest
from pydantic import ValidationError

from showtalk.adapter.clerk.client import MockIdentityProvider
from showtalk.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from showtalk.domain.error import CommentFetchTimeoutError
from showtalk.domain.service import (
    AuthorEnrichmentService,
    CommentService,
    VoteService,
)
from showtalk.domain.value import SortMode, UserId, VoteValue
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _post(unit_env, content, author="user_a", parent_id=None):
    use_case = await unit_env.get(CreateCommentUseCase)
    response = await use_case.execute(
        CreateCommentRequest(
            discussion_id=1, content=content, author_id=author, parent_id=parent_id
        )
    )
    return response.comment


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_top_level_page_with_stats_and_pagination(self, unit_env):
        # Arrange
        root = await _post(unit_env, "root")
        await _post(unit_env, "reply", author="user_b", parent_id=root.comment_id)
        await _post(unit_env, "second root")
        use_case = await unit_env.get(GetCommentsUseCase)

        # Act
        response = await use_case.execute(GetCommentsRequest(discussion_id=1, limit=2))

        # Assert
        assert len(response.comments) == 2
        assert response.stats is not None
        assert response.stats.total_comments == 3
        assert response.stats.top_level_comments == 2
        assert response.stats.max_depth == 1
        assert response.pagination.limit == 2
        assert response.pagination.offset == 0
        assert response.pagination.has_more is True

    @pytest.mark.asyncio
    async def test_reply_level_has_no_stats(self, unit_env):
        root = await _post(unit_env, "root")
        await _post(unit_env, "reply", parent_id=root.comment_id)
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(
            GetCommentsRequest(discussion_id=1, parent_id=root.comment_id)
        )

        assert response.stats is None
        assert len(response.comments) == 1
        assert response.pagination.has_more is False

    @pytest.mark.asyncio
    async def test_authors_enriched_across_tree(self, unit_env):
        identity = await unit_env.get(MockIdentityProvider)
        identity.register(UserId("user_a"), "https://img.example/a.png")
        identity.register(UserId("user_b"), "https://img.example/b.png")
        root = await _post(unit_env, "root", author="user_a")
        await _post(unit_env, "reply", author="user_b", parent_id=root.comment_id)
        await _post(unit_env, "another", author="user_a")
        identity.calls.clear()
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(GetCommentsRequest(discussion_id=1))

        by_id = {c.comment_id: c for c in response.comments}
        assert by_id[root.comment_id].author.image_url == "https://img.example/a.png"
        assert (
            by_id[root.comment_id].replies[0].author.image_url
            == "https://img.example/b.png"
        )
        assert sorted(identity.calls) == ["user_a", "user_b"]

    @pytest.mark.asyncio
    async def test_viewer_sees_own_vote(self, unit_env):
        root = await _post(unit_env, "root")
        votes = await unit_env.get(VoteService)
        await votes.cast_vote(root.comment_id, UserId("viewer"), VoteValue.DOWNVOTE)
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(
            GetCommentsRequest(discussion_id=1, sort=SortMode.TOP, viewer_id="viewer")
        )

        assert response.comments[0].user_vote == "DOWNVOTE"
        assert response.comments[0].score == -1

    @pytest.mark.asyncio
    async def test_empty_discussion(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(GetCommentsRequest(discussion_id=404))

        assert response.comments == []
        assert response.stats.total_comments == 0
        assert response.pagination.has_more is False

    @pytest.mark.asyncio
    async def test_slow_read_times_out(self, unit_env):
        class _SlowFeed:
            async def get_comments(self, **kwargs):
                await asyncio.sleep(5)
                return []

        use_case = GetCommentsUseCase(
            comment_feed_service=_SlowFeed(),
            comment_service=await unit_env.get(CommentService),
            author_enrichment_service=await unit_env.get(AuthorEnrichmentService),
            timeout_seconds=0.01,
        )

        with pytest.raises(CommentFetchTimeoutError):
            await use_case.execute(GetCommentsRequest(discussion_id=1))


class TestGetCommentsRequest:
    """Request shaping mirrors the listing endpoint's bounds."""

    def test_defaults(self):
        request = GetCommentsRequest(discussion_id=1)

        assert request.sort == SortMode.NEW
        assert request.limit == 50
        assert request.offset == 0
        assert request.max_depth == 1

    def test_sort_parsed_from_string(self):
        assert GetCommentsRequest(discussion_id=1, sort="best").sort == SortMode.BEST

    @pytest.mark.parametrize(
        "overrides",
        [
            {"sort": "hot"},
            {"limit": 0},
            {"limit": 101},
            {"offset": -1},
            {"max_depth": 11},
        ],
    )
    def test_rejects_out_of_range(self, overrides):
        with pytest.raises(ValidationError):
            GetCommentsRequest(discussion_id=1, **overrides)
