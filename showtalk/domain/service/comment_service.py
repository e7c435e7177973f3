"""Comment domain service (thread store)."""

from datetime import datetime

import logfire

from showtalk.domain.error import (
    ContentDeletedException,
    CrossDiscussionParentError,
    NestingTooDeepError,
    NotAuthorizedError,
    NotFoundError,
    ParentNotFoundError,
)
from showtalk.domain.model.comment import (
    MAX_COMMENT_DEPTH,
    Comment,
    CommentDraft,
    CommentRecord,
    CommentStats,
)
from showtalk.domain.repository import CommentRepository
from showtalk.domain.value import PATH_SEGMENT_WIDTH, CommentId, DiscussionId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    span_prefix = "comment_service"

    def __init__(
        self,
        comment_repository: CommentRepository,
        max_depth: int = MAX_COMMENT_DEPTH,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            max_depth: Deepest nesting level a reply may reach
        """
        self.comment_repository = comment_repository
        self.max_depth = max_depth

    async def create_comment(
        self,
        discussion_id: DiscussionId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
        spoiler: bool = False,
    ) -> CommentRecord:
        """Create a comment in a discussion or a reply to another comment.

        Args:
            discussion_id: Discussion ID
            author_id: Author user ID
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)
            spoiler: Whether the comment contains spoilers

        Returns:
            Created comment record (zero votes, path and depth set)

        Raises:
            ParentNotFoundError: If the parent comment does not exist
            CrossDiscussionParentError: If the parent is in another discussion
            NestingTooDeepError: If the reply would exceed the depth cap
        """
        with self.span(
            "create_comment",
            discussion_id=discussion_id,
            author_id=author_id,
            parent_id=parent_id,
        ):
            depth = 0
            parent: Comment | None = None
            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=parent_id,
                        discussion_id=discussion_id,
                    )
                    raise ParentNotFoundError(parent_id)
                if parent.discussion_id != discussion_id:
                    logfire.warn(
                        "Parent comment does not belong to discussion",
                        parent_id=parent_id,
                        parent_discussion_id=parent.discussion_id,
                        target_discussion_id=discussion_id,
                    )
                    raise CrossDiscussionParentError(parent_id, discussion_id)
                depth = parent.depth + 1
                if depth > self.max_depth:
                    logfire.warn(
                        "Comment nesting too deep",
                        parent_id=parent_id,
                        depth=depth,
                        max_depth=self.max_depth,
                    )
                    raise NestingTooDeepError(self.max_depth)

            draft = CommentDraft(
                discussion_id=discussion_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
                depth=depth,
                spoiler=spoiler,
                created_at=datetime.now(),
            )
            record = await self.comment_repository.create(
                draft, parent.path if parent else None
            )

            if record.id >= 10**PATH_SEGMENT_WIDTH:
                logfire.warn(
                    "Comment id exceeds path segment width, path order no longer "
                    "matches creation order",
                    comment_id=record.id,
                    segment_width=PATH_SEGMENT_WIDTH,
                )
            logfire.info(
                "Comment created",
                comment_id=record.id,
                discussion_id=discussion_id,
                depth=record.depth,
                path=str(record.path),
            )
            return record

    async def get_comment_stats(self, discussion_id: DiscussionId) -> CommentStats:
        """Get total count, top-level count and maximum depth of a discussion."""
        with self.span(
            "get_comment_stats", discussion_id=discussion_id
        ):
            return await self.comment_repository.get_stats(discussion_id)

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> Comment:
        """Soft delete a comment owned by the user.

        The row stays in place because replies reference it as an ancestor.

        Args:
            comment_id: Comment ID
            user_id: User requesting the deletion

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the author
            ContentDeletedException: If the comment is already deleted
        """
        with self.span(
            "delete_comment", comment_id=comment_id, user_id=user_id
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment", str(comment_id))
            if comment.author_id != user_id:
                logfire.warn(
                    "Unauthorized comment deletion attempt",
                    comment_id=comment_id,
                    user_id=user_id,
                )
                raise NotAuthorizedError("comment", str(comment_id), user_id)
            if comment.is_deleted:
                raise ContentDeletedException("comment", str(comment_id))

            deleted = await self.comment_repository.soft_delete(comment_id)
            if deleted is None:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment deleted", comment_id=comment_id)
            return deleted
