"""Get comment stats use case."""

from pydantic import BaseModel

from showtalk.domain.service import CommentService
from showtalk.domain.value import DiscussionId

from .views import CommentStatsItem


class GetCommentStatsRequest(BaseModel):
    """Get comment stats request."""

    discussion_id: int


class GetCommentStatsUseCase:
    """Use case for discussion-level comment statistics."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment stats use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentStatsRequest) -> CommentStatsItem:
        """Return total, top-level and maximum-depth figures for a discussion."""
        stats = await self.comment_service.get_comment_stats(
            DiscussionId(request.discussion_id)
        )
        return CommentStatsItem(**stats.model_dump())
