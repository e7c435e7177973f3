"""Get comments use case."""

import asyncio

import logfire
from pydantic import BaseModel, Field

from showtalk.domain.error import CommentFetchTimeoutError
from showtalk.domain.model import MAX_COMMENT_DEPTH
from showtalk.domain.service import (
    AuthorEnrichmentService,
    CommentFeedService,
    CommentService,
)
from showtalk.domain.value import CommentId, DiscussionId, SortMode, UserId

from .views import CommentNode, CommentStatsItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    discussion_id: int
    parent_id: int | None = None  # None for top-level comments
    sort: SortMode = SortMode.NEW
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    max_depth: int = Field(default=1, ge=0, le=MAX_COMMENT_DEPTH)
    viewer_id: str | None = None  # Current user, to expose their own votes


class PaginationItem(BaseModel):
    """Pagination details in response."""

    limit: int
    offset: int
    has_more: bool


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentNode]
    stats: CommentStatsItem | None  # Only for top-level requests
    pagination: PaginationItem


class GetCommentsUseCase:
    """Use case for listing one page of a discussion level with replies."""

    def __init__(
        self,
        comment_feed_service: CommentFeedService,
        comment_service: CommentService,
        author_enrichment_service: AuthorEnrichmentService,
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_feed_service: Sorting and pagination service
            comment_service: Comment domain service (for stats)
            author_enrichment_service: Attaches author avatars
            timeout_seconds: Request-level timeout for the whole read
        """
        self.comment_feed_service = comment_feed_service
        self.comment_service = comment_service
        self.author_enrichment_service = author_enrichment_service
        self.timeout_seconds = timeout_seconds

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Steps:
        1. Fetch, rank and page the requested level with its replies
        2. Attach author avatars across the whole returned tree
        3. Add discussion stats for top-level requests

        Args:
            request: Get comments request

        Returns:
            Page of comment trees, stats and pagination details

        Raises:
            CommentFetchTimeoutError: If the read exceeds the timeout
        """
        try:
            return await asyncio.wait_for(self._run(request), self.timeout_seconds)
        except asyncio.TimeoutError as e:
            logfire.error(
                "Comment fetch timed out",
                discussion_id=request.discussion_id,
                sort=request.sort.value,
                timeout_seconds=self.timeout_seconds,
            )
            raise CommentFetchTimeoutError(
                request.discussion_id, self.timeout_seconds
            ) from e

    async def _run(self, request: GetCommentsRequest) -> GetCommentsResponse:
        discussion_id = DiscussionId(request.discussion_id)
        comments = await self.comment_feed_service.get_comments(
            discussion_id=discussion_id,
            parent_id=CommentId(request.parent_id)
            if request.parent_id is not None
            else None,
            sort=request.sort,
            limit=request.limit,
            offset=request.offset,
            viewer_id=UserId(request.viewer_id) if request.viewer_id else None,
            max_depth=request.max_depth,
        )
        comments = await self.author_enrichment_service.enrich(comments)

        stats = None
        if request.parent_id is None:
            domain_stats = await self.comment_service.get_comment_stats(discussion_id)
            stats = CommentStatsItem(**domain_stats.model_dump())

        return GetCommentsResponse(
            comments=[CommentNode.from_domain(comment) for comment in comments],
            stats=stats,
            pagination=PaginationItem(
                limit=request.limit,
                offset=request.offset,
                has_more=len(comments) == request.limit,
            ),
        )
