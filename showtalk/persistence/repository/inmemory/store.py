"""Shared state for the in-memory repositories.

Comments, votes and reactions reference each other, so the in-memory
repositories share one store the way the SQL ones share one session.
"""

from dataclasses import dataclass, field
from itertools import count
from typing import Iterator, Optional

from showtalk.domain.model import Comment, Reaction, ReactionType, Vote
from showtalk.domain.value import CommentId, ReactionTypeId, UserId


def _ids() -> Iterator[int]:
    return count(1)


@dataclass
class InMemoryStore:
    """Tables held as dicts keyed by primary key."""

    comments: dict[CommentId, Comment] = field(default_factory=dict)
    votes: dict[tuple[CommentId, UserId], Vote] = field(default_factory=dict)
    reactions: dict[tuple[CommentId, UserId, ReactionTypeId], Reaction] = field(
        default_factory=dict
    )
    reaction_types: dict[ReactionTypeId, ReactionType] = field(default_factory=dict)
    usernames: dict[UserId, str] = field(default_factory=dict)

    comment_ids: Iterator[int] = field(default_factory=_ids)
    vote_ids: Iterator[int] = field(default_factory=_ids)
    reaction_ids: Iterator[int] = field(default_factory=_ids)

    def add_user(self, user_id: UserId, username: str) -> None:
        self.usernames[user_id] = username

    def add_reaction_type(
        self,
        name: str,
        emoji: Optional[str] = None,
        category: Optional[str] = None,
    ) -> ReactionType:
        reaction_type = ReactionType(
            id=ReactionTypeId(len(self.reaction_types) + 1),
            name=name,
            emoji=emoji,
            category=category,
        )
        self.reaction_types[reaction_type.id] = reaction_type
        return reaction_type
