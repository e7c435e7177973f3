"""Reaction repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from showtalk.domain.model.reaction import Reaction, ReactionType
from showtalk.domain.value import CommentId, ReactionTypeId, UserId


class ReactionRepository(ABC):
    """Repository for reactions and the reaction-type catalog."""

    @abstractmethod
    async def find_type(self, reaction_type_id: ReactionTypeId) -> Optional[ReactionType]:
        """Find a reaction type by ID.

        Args:
            reaction_type_id: The reaction type's ID

        Returns:
            The reaction type if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_types(self) -> List[ReactionType]:
        """List all reaction types ordered by ID."""
        pass

    @abstractmethod
    async def find(
        self,
        comment_id: CommentId,
        user_id: UserId,
        reaction_type_id: ReactionTypeId,
    ) -> Optional[Reaction]:
        """Find a specific reaction of a user on a comment."""
        pass

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> List[Reaction]:
        """Find all reactions on a comment."""
        pass

    @abstractmethod
    async def save(
        self,
        comment_id: CommentId,
        user_id: UserId,
        reaction_type: ReactionType,
    ) -> Reaction:
        """Store a new reaction.

        Args:
            comment_id: The comment's ID
            user_id: The reacting user's ID
            reaction_type: The reaction type

        Returns:
            The stored reaction

        Raises:
            PersistenceError: If the same reaction already exists
        """
        pass

    @abstractmethod
    async def delete(
        self,
        comment_id: CommentId,
        user_id: UserId,
        reaction_type_id: ReactionTypeId,
    ) -> bool:
        """Delete a reaction.

        Returns:
            True if a reaction was deleted, False if none existed
        """
        pass
