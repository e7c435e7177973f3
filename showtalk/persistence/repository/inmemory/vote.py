"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Optional

from showtalk.domain.model import Vote
from showtalk.domain.repository.vote import VoteRepository
from showtalk.domain.value import CommentId, UserId, VoteId, VoteValue

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self.store = store or InMemoryStore()

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[Vote]:
        """Find a user's vote on a comment."""
        return self.store.votes.get((comment_id, user_id))

    async def find_by_comment(self, comment_id: CommentId) -> list[Vote]:
        """Find all votes on a comment."""
        votes = [v for v in self.store.votes.values() if v.comment_id == comment_id]
        return sorted(votes, key=lambda v: v.id)

    async def upsert(
        self, user_id: UserId, comment_id: CommentId, value: VoteValue
    ) -> Vote:
        """Insert the vote or replace its direction."""
        key = (comment_id, user_id)
        existing = self.store.votes.get(key)
        if existing is not None:
            vote = existing.model_copy(update={"value": value})
        else:
            vote = Vote(
                id=VoteId(next(self.store.vote_ids)),
                comment_id=comment_id,
                user_id=user_id,
                value=value,
                created_at=datetime.now(),
            )
        self.store.votes[key] = vote
        return vote

    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's vote on a comment."""
        return self.store.votes.pop((comment_id, user_id), None) is not None
