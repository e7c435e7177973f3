"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from showtalk.domain.model.vote import Vote
from showtalk.domain.value import CommentId, UserId, VoteValue


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment.

        Args:
            user_id: The voter's ID
            comment_id: The comment's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> List[Vote]:
        """Find all votes on a comment.

        Args:
            comment_id: The comment's ID

        Returns:
            List of votes on the comment
        """
        pass

    @abstractmethod
    async def upsert(
        self, user_id: UserId, comment_id: CommentId, value: VoteValue
    ) -> Vote:
        """Create the user's vote or replace its direction.

        Args:
            user_id: The voter's ID
            comment_id: The comment's ID
            value: Vote direction

        Returns:
            The live vote
        """
        pass

    @abstractmethod
    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's vote on a comment.

        Args:
            user_id: The voter's ID
            comment_id: The comment's ID

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass
