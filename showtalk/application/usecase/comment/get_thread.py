"""Get thread use case."""

from pydantic import BaseModel

from showtalk.domain.service import AuthorEnrichmentService, CommentFeedService
from showtalk.domain.value import DiscussionId, UserId

from .views import CommentNode


class GetThreadRequest(BaseModel):
    """Get thread request."""

    discussion_id: int
    viewer_id: str | None = None


class GetThreadResponse(BaseModel):
    """Get thread response."""

    discussion_id: int
    comments: list[CommentNode]
    total: int


class GetThreadUseCase:
    """Use case for reading a whole discussion as one reply tree."""

    def __init__(
        self,
        comment_feed_service: CommentFeedService,
        author_enrichment_service: AuthorEnrichmentService,
    ) -> None:
        """Initialize get thread use case.

        Args:
            comment_feed_service: Comment feed service
            author_enrichment_service: Attaches author avatars
        """
        self.comment_feed_service = comment_feed_service
        self.author_enrichment_service = author_enrichment_service

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        Comments come back in path order, so every reply list is chronological.

        Args:
            request: Get thread request

        Returns:
            Root comments with all replies nested, and the total comment count
        """
        tree = await self.comment_feed_service.get_thread(
            DiscussionId(request.discussion_id),
            viewer_id=UserId(request.viewer_id) if request.viewer_id else None,
        )
        tree = await self.author_enrichment_service.enrich(tree)
        nodes = [CommentNode.from_domain(comment) for comment in tree]
        return GetThreadResponse(
            discussion_id=request.discussion_id,
            comments=nodes,
            total=_count(nodes),
        )


def _count(nodes: list[CommentNode]) -> int:
    return sum(1 + _count(node.replies) for node in nodes)
