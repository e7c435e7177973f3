"""Reaction domain service."""

import logfire

from showtalk.domain.error import NotFoundError
from showtalk.domain.model.reaction import Reaction, ReactionType
from showtalk.domain.repository import CommentRepository, ReactionRepository
from showtalk.domain.value import CommentId, ReactionTypeId, UserId

from .base import Service


class ReactionService(Service):
    """Domain service for reactions on comments."""

    span_prefix = "reaction_service"

    def __init__(
        self,
        reaction_repository: ReactionRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize reaction service.

        Args:
            reaction_repository: Reaction repository
            comment_repository: Comment repository
        """
        self.reaction_repository = reaction_repository
        self.comment_repository = comment_repository

    async def add_reaction(
        self,
        comment_id: CommentId,
        user_id: UserId,
        reaction_type_id: ReactionTypeId,
    ) -> Reaction:
        """Add a reaction to a comment.

        Adding a reaction type the user already left returns the existing
        reaction unchanged.

        Args:
            comment_id: Comment ID
            user_id: Reacting user ID
            reaction_type_id: Reaction type ID

        Returns:
            The live reaction

        Raises:
            NotFoundError: If the comment or the reaction type does not exist
        """
        with self.span(
            "add_reaction",
            comment_id=comment_id,
            user_id=user_id,
            reaction_type_id=reaction_type_id,
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Reaction on non-existent comment", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))

            reaction_type = await self.reaction_repository.find_type(reaction_type_id)
            if reaction_type is None:
                raise NotFoundError("ReactionType", str(reaction_type_id))

            existing = await self.reaction_repository.find(
                comment_id, user_id, reaction_type_id
            )
            if existing is not None:
                logfire.info(
                    "Reaction already present",
                    comment_id=comment_id,
                    user_id=user_id,
                    reaction=reaction_type.name,
                )
                return existing

            reaction = await self.reaction_repository.save(
                comment_id, user_id, reaction_type
            )
            logfire.info(
                "Reaction added",
                comment_id=comment_id,
                user_id=user_id,
                reaction=reaction_type.name,
            )
            return reaction

    async def remove_reaction(
        self,
        comment_id: CommentId,
        user_id: UserId,
        reaction_type_id: ReactionTypeId,
    ) -> bool:
        """Remove one of the user's reactions from a comment.

        Returns:
            True if a reaction was removed, False if none existed
        """
        with self.span(
            "remove_reaction",
            comment_id=comment_id,
            user_id=user_id,
            reaction_type_id=reaction_type_id,
        ):
            removed = await self.reaction_repository.delete(
                comment_id, user_id, reaction_type_id
            )
            if removed:
                logfire.info(
                    "Reaction removed",
                    comment_id=comment_id,
                    user_id=user_id,
                    reaction_type_id=reaction_type_id,
                )
            return removed

    async def list_reaction_types(self) -> list[ReactionType]:
        """List the reaction-type catalog."""
        return await self.reaction_repository.list_types()
