"""Add reaction use case."""

from pydantic import BaseModel

from showtalk.application.usecase.comment.views import ReactionItem
from showtalk.domain.service import ReactionService
from showtalk.domain.value import CommentId, ReactionTypeId, UserId


class AddReactionRequest(BaseModel):
    """Add reaction request."""

    comment_id: int
    user_id: str  # User ID from authenticated user
    reaction_type_id: int


class AddReactionResponse(BaseModel):
    """Add reaction response."""

    comment_id: int
    reaction: ReactionItem


class AddReactionUseCase:
    """Use case for reacting to a comment."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize add reaction use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: AddReactionRequest) -> AddReactionResponse:
        """Execute add reaction flow.

        Args:
            request: Add reaction request

        Returns:
            The live reaction (existing one if already present)

        Raises:
            NotFoundError: If the comment or reaction type does not exist
        """
        reaction = await self.reaction_service.add_reaction(
            CommentId(request.comment_id),
            UserId(request.user_id),
            ReactionTypeId(request.reaction_type_id),
        )
        return AddReactionResponse(
            comment_id=request.comment_id,
            reaction=ReactionItem.from_domain(reaction),
        )
