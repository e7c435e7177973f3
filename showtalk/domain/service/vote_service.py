"""Vote domain service."""

import logfire

from showtalk.domain.error import NotFoundError
from showtalk.domain.repository import CommentRepository, VoteRepository
from showtalk.domain.value import CommentId, UserId, VoteValue

from .base import Service
from .scoring import VoteTally, tally_votes


class VoteService(Service):
    """Domain service for vote operations."""

    span_prefix = "vote_service"

    def __init__(
        self,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            comment_repository: Comment repository
        """
        self.vote_repository = vote_repository
        self.comment_repository = comment_repository

    async def cast_vote(
        self, comment_id: CommentId, user_id: UserId, value: VoteValue
    ) -> VoteTally:
        """Vote on a comment.

        A user holds at most one live vote per comment. Voting again in the
        other direction replaces the earlier vote.

        Args:
            comment_id: Comment ID
            user_id: Voter user ID
            value: Vote direction

        Returns:
            Fresh tally of the comment's votes

        Raises:
            NotFoundError: If the comment does not exist
        """
        with self.span(
            "cast_vote",
            comment_id=comment_id,
            user_id=user_id,
            value=value.value,
        ):
            await self._require_comment(comment_id)
            await self.vote_repository.upsert(user_id, comment_id, value)
            tally = await self.get_tally(comment_id)
            logfire.info(
                "Vote cast",
                comment_id=comment_id,
                user_id=user_id,
                value=value.value,
                score=tally.score,
            )
            return tally

    async def remove_vote(self, comment_id: CommentId, user_id: UserId) -> VoteTally:
        """Remove the user's vote from a comment.

        Args:
            comment_id: Comment ID
            user_id: Voter user ID

        Returns:
            Fresh tally of the comment's votes

        Raises:
            NotFoundError: If the comment does not exist
        """
        with self.span(
            "remove_vote", comment_id=comment_id, user_id=user_id
        ):
            await self._require_comment(comment_id)
            deleted = await self.vote_repository.delete_by_user_and_comment(
                user_id, comment_id
            )
            if deleted:
                logfire.info("Vote removed", comment_id=comment_id, user_id=user_id)
            else:
                logfire.info(
                    "No vote to remove", comment_id=comment_id, user_id=user_id
                )
            return await self.get_tally(comment_id)

    async def get_tally(self, comment_id: CommentId) -> VoteTally:
        """Count the live votes on a comment."""
        votes = await self.vote_repository.find_by_comment(comment_id)
        return tally_votes(votes)

    async def _require_comment(self, comment_id: CommentId) -> None:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Vote on non-existent comment", comment_id=comment_id)
            raise NotFoundError("Comment", str(comment_id))
