"""Remove reaction use case."""

from pydantic import BaseModel

from showtalk.domain.service import ReactionService
from showtalk.domain.value import CommentId, ReactionTypeId, UserId


class RemoveReactionRequest(BaseModel):
    """Remove reaction request."""

    comment_id: int
    user_id: str  # User ID from authenticated user
    reaction_type_id: int


class RemoveReactionResponse(BaseModel):
    """Remove reaction response."""

    success: bool
    message: str


class RemoveReactionUseCase:
    """Use case for removing a reaction from a comment."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize remove reaction use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: RemoveReactionRequest) -> RemoveReactionResponse:
        """Execute remove reaction flow."""
        removed = await self.reaction_service.remove_reaction(
            CommentId(request.comment_id),
            UserId(request.user_id),
            ReactionTypeId(request.reaction_type_id),
        )

        if removed:
            return RemoveReactionResponse(
                success=True,
                message="Reaction removed successfully",
            )
        else:
            return RemoveReactionResponse(
                success=False,
                message="No reaction found to remove",
            )
