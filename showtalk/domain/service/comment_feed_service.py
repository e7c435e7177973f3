"""Comment feed: sorting and pagination of comment listings."""

from typing import Callable, Optional

import logfire

from showtalk.domain.model.comment import RankedComment
from showtalk.domain.repository import CommentRepository
from showtalk.domain.value import CommentId, DiscussionId, SortMode, UserId

from .base import Service
from .tree_assembler import TreeAssembler

DEFAULT_RANKING_CANDIDATE_LIMIT = 1000

_RANKING_KEYS: dict[SortMode, Callable[[RankedComment], tuple]] = {
    SortMode.TOP: lambda comment: (-comment.score, comment.id),
    SortMode.BEST: lambda comment: (-comment.wilson_score, comment.id),
}


class CommentFeedService(Service):
    """Domain service that decides where ranking happens for each sort mode.

    ``new`` is stored data, so ordering and paging are pushed to the store.
    ``top`` and ``best`` depend on live votes: every candidate at the level is
    fetched, scored and sorted before the requested page is sliced out.
    """

    span_prefix = "comment_feed_service"

    def __init__(
        self,
        comment_repository: CommentRepository,
        tree_assembler: TreeAssembler,
        ranking_candidate_limit: int = DEFAULT_RANKING_CANDIDATE_LIMIT,
    ) -> None:
        """Initialize comment feed service.

        Args:
            comment_repository: Comment repository
            tree_assembler: Scores records and nests replies
            ranking_candidate_limit: Ceiling on candidates fetched for in-memory ranking
        """
        self.comment_repository = comment_repository
        self.tree_assembler = tree_assembler
        self.ranking_candidate_limit = ranking_candidate_limit

    async def get_comments(
        self,
        discussion_id: DiscussionId,
        parent_id: Optional[CommentId] = None,
        sort: SortMode = SortMode.NEW,
        limit: int = 50,
        offset: int = 0,
        viewer_id: Optional[UserId] = None,
        max_depth: int = 1,
    ) -> list[RankedComment]:
        """Get one page of comments at a thread level with their replies.

        Args:
            discussion_id: Discussion ID
            parent_id: Parent comment ID (None for top-level comments)
            sort: Sort mode
            limit: Page size
            offset: Number of comments to skip
            viewer_id: Current viewer (to expose their own vote)
            max_depth: Levels of replies to nest below each returned comment

        Returns:
            Ranked comments of the page, replies nested in path order
        """
        with self.span(
            "get_comments",
            discussion_id=discussion_id,
            parent_id=parent_id,
            sort=sort.value,
            limit=limit,
            offset=offset,
            max_depth=max_depth,
        ):
            if sort == SortMode.NEW:
                records = await self.comment_repository.find_level(
                    discussion_id, parent_id, limit=limit, offset=offset
                )
                page = self.tree_assembler.assemble(records, viewer_id)
            else:
                page = await self._ranked_page(
                    discussion_id, parent_id, sort, limit, offset, viewer_id
                )

            if not page or max_depth <= 0:
                return page

            descendants = await self.comment_repository.find_replies(page, max_depth)
            logfire.debug(
                "Loaded replies for page",
                discussion_id=discussion_id,
                page_size=len(page),
                reply_count=len(descendants),
            )
            return self.tree_assembler.attach_replies(page, descendants, viewer_id)

    async def get_thread(
        self, discussion_id: DiscussionId, viewer_id: Optional[UserId] = None
    ) -> list[RankedComment]:
        """Get a whole discussion as a reply tree in path order."""
        with self.span(
            "get_thread", discussion_id=discussion_id
        ):
            records = await self.comment_repository.find_by_discussion(discussion_id)
            return self.tree_assembler.build_tree(records, viewer_id)

    async def _ranked_page(
        self,
        discussion_id: DiscussionId,
        parent_id: Optional[CommentId],
        sort: SortMode,
        limit: int,
        offset: int,
        viewer_id: Optional[UserId],
    ) -> list[RankedComment]:
        candidates = await self.comment_repository.find_level(
            discussion_id, parent_id, limit=self.ranking_candidate_limit, offset=0
        )
        if len(candidates) >= self.ranking_candidate_limit:
            logfire.warn(
                "Ranking candidate ceiling reached, ranking is best-effort",
                discussion_id=discussion_id,
                parent_id=parent_id,
                sort=sort.value,
                ceiling=self.ranking_candidate_limit,
            )

        ranked = sorted(
            self.tree_assembler.assemble(candidates, viewer_id),
            key=_RANKING_KEYS[sort],
        )
        return ranked[offset : offset + limit]
