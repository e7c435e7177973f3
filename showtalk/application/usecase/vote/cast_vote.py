"""Cast vote use case."""

from pydantic import BaseModel

from showtalk.domain.service import VoteService
from showtalk.domain.value import CommentId, UserId, VoteValue


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    comment_id: int
    user_id: str  # User ID from authenticated user
    value: VoteValue


class VoteTallyResponse(BaseModel):
    """Vote counts of a comment after a vote change."""

    comment_id: int
    upvotes: int
    downvotes: int
    score: int
    wilson_score: float
    user_vote: VoteValue | None


class CastVoteUseCase:
    """Use case for upvoting or downvoting a comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> VoteTallyResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Fresh vote counts

        Raises:
            NotFoundError: If the comment does not exist
        """
        tally = await self.vote_service.cast_vote(
            CommentId(request.comment_id), UserId(request.user_id), request.value
        )
        return VoteTallyResponse(
            comment_id=request.comment_id,
            upvotes=tally.upvotes,
            downvotes=tally.downvotes,
            score=tally.score,
            wilson_score=tally.wilson_score,
            user_vote=request.value,
        )
