"""In-memory reaction repository for testing."""

from datetime import datetime
from typing import Optional

from showtalk.domain.error import PersistenceError
from showtalk.domain.model import Reaction, ReactionType
from showtalk.domain.repository.reaction import ReactionRepository
from showtalk.domain.value import CommentId, ReactionId, ReactionTypeId, UserId

from .store import InMemoryStore


class InMemoryReactionRepository(ReactionRepository):
    """In-memory implementation of ReactionRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self.store = store or InMemoryStore()

    async def find_type(self, reaction_type_id: ReactionTypeId) -> Optional[ReactionType]:
        """Find a reaction type by ID."""
        return self.store.reaction_types.get(reaction_type_id)

    async def list_types(self) -> list[ReactionType]:
        """List all reaction types."""
        return sorted(self.store.reaction_types.values(), key=lambda t: t.id)

    async def find(
        self,
        comment_id: CommentId,
        user_id: UserId,
        reaction_type_id: ReactionTypeId,
    ) -> Optional[Reaction]:
        """Find a specific reaction."""
        return self.store.reactions.get((comment_id, user_id, reaction_type_id))

    async def find_by_comment(self, comment_id: CommentId) -> list[Reaction]:
        """Find all reactions on a comment."""
        reactions = [
            r for r in self.store.reactions.values() if r.comment_id == comment_id
        ]
        return sorted(reactions, key=lambda r: r.id)

    async def save(
        self,
        comment_id: CommentId,
        user_id: UserId,
        reaction_type: ReactionType,
    ) -> Reaction:
        """Store a reaction, enforcing one per (comment, user, type)."""
        key = (comment_id, user_id, reaction_type.id)
        if key in self.store.reactions:
            raise PersistenceError(
                f"Duplicate reaction {reaction_type.name} on comment {comment_id}"
            )
        reaction = Reaction(
            id=ReactionId(next(self.store.reaction_ids)),
            comment_id=comment_id,
            user_id=user_id,
            reaction_type=reaction_type,
            created_at=datetime.now(),
        )
        self.store.reactions[key] = reaction
        return reaction

    async def delete(
        self,
        comment_id: CommentId,
        user_id: UserId,
        reaction_type_id: ReactionTypeId,
    ) -> bool:
        """Delete a reaction."""
        key = (comment_id, user_id, reaction_type_id)
        return self.store.reactions.pop(key, None) is not None
