"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from showtalk.domain.model.comment import (
    Comment,
    CommentDraft,
    CommentRecord,
    CommentStats,
)
from showtalk.domain.value import CommentId, CommentPath, DiscussionId


class CommentRepository(ABC):
    """Repository for Comment entity (the thread store).

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(
        self, draft: CommentDraft, parent_path: Optional[CommentPath] = None
    ) -> CommentRecord:
        """Persist a new comment and its materialized path.

        Two writes happen inside one transaction: the row is inserted with a
        placeholder path to obtain its id, then the real path (parent path plus
        the padded id) is written. Readers never observe the placeholder.

        Args:
            draft: Validated comment contents
            parent_path: Path of the parent comment (None for top-level)

        Returns:
            The stored comment with zero votes and reactions

        Raises:
            PersistenceError: If the store rejects either write
        """
        pass

    @abstractmethod
    async def find_level(
        self,
        discussion_id: DiscussionId,
        parent_id: Optional[CommentId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[CommentRecord]:
        """Find the comments at one level of a thread, newest first.

        Ordering is created_at DESC with id DESC as tie-breaker, and
        limit/offset are applied by the store.

        Args:
            discussion_id: The discussion ID
            parent_id: Parent comment ID (None for top-level comments)
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Comment records with their votes and reactions
        """
        pass

    @abstractmethod
    async def find_replies(
        self,
        ancestors: Sequence[Comment],
        max_depth: int,
    ) -> List[CommentRecord]:
        """Find descendants of the given comments, down to max_depth levels.

        Uses a path prefix match, so no recursive query is needed.

        Args:
            ancestors: Comments whose descendants are wanted
            max_depth: Number of levels below each ancestor to include

        Returns:
            Flat list of descendant records in path (tree) order
        """
        pass

    @abstractmethod
    async def find_by_discussion(
        self, discussion_id: DiscussionId
    ) -> List[CommentRecord]:
        """Find every comment of a discussion in path (tree) order.

        Args:
            discussion_id: The discussion ID

        Returns:
            Flat list of records in tree order
        """
        pass

    @abstractmethod
    async def soft_delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Flag a comment as deleted and bump its updated_at.

        Args:
            comment_id: The comment ID

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def get_stats(self, discussion_id: DiscussionId) -> CommentStats:
        """Aggregate comment counts and maximum depth for a discussion.

        Args:
            discussion_id: The discussion ID

        Returns:
            Comment statistics (all zeros for an empty discussion)
        """
        pass
