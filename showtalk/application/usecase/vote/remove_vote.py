"""Remove vote use case."""

from pydantic import BaseModel

from showtalk.domain.service import VoteService
from showtalk.domain.value import CommentId, UserId

from .cast_vote import VoteTallyResponse


class RemoveVoteRequest(BaseModel):
    """Remove vote request."""

    comment_id: int
    user_id: str  # User ID from authenticated user


class RemoveVoteUseCase:
    """Use case for withdrawing a vote from a comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize remove vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: RemoveVoteRequest) -> VoteTallyResponse:
        """Execute remove vote flow.

        Removing a vote that does not exist is not an error.

        Args:
            request: Remove vote request

        Returns:
            Fresh vote counts

        Raises:
            NotFoundError: If the comment does not exist
        """
        tally = await self.vote_service.remove_vote(
            CommentId(request.comment_id), UserId(request.user_id)
        )
        return VoteTallyResponse(
            comment_id=request.comment_id,
            upvotes=tally.upvotes,
            downvotes=tally.downvotes,
            score=tally.score,
            wilson_score=tally.wilson_score,
            user_vote=None,
        )
