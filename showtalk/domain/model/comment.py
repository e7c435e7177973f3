"""Comment entities.

Comments are threaded discussions attached to a discussion. Threading uses a
materialized path so that ancestor/descendant queries are prefix matches and
tree order is plain string order.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from showtalk.domain.model.common import CreatedModel, DomainModel
from showtalk.domain.model.reaction import Reaction
from showtalk.domain.model.vote import Vote
from showtalk.domain.value import (
    CommentId,
    CommentPath,
    DiscussionId,
    UserId,
    VoteValue,
)

MAX_COMMENT_DEPTH = 10
MAX_COMMENT_LENGTH = 10000


class CommentDraft(CreatedModel):
    """A validated comment that has not been assigned an id yet.

    The path embeds the row's own id, so it can only be computed by the
    repository once storage hands out that id.
    """

    discussion_id: DiscussionId
    author_id: UserId
    content: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)
    spoiler: bool = False


class Comment(CreatedModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, parent depth + 1 for replies)
    - path: Materialized path ending in this comment's own id
    """

    id: CommentId
    discussion_id: DiscussionId
    author_id: UserId
    content: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)
    path: CommentPath
    spoiler: bool = False
    is_deleted: bool = False
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def check_path_consistency(self) -> "Comment":
        """Depth, parent and own id must agree with the materialized path."""
        ids = self.path.ids
        if ids[-1] != self.id:
            raise ValueError(f"Path {self.path} does not end with comment id {self.id}")
        if self.depth != self.path.depth:
            raise ValueError(
                f"Depth {self.depth} does not match path {self.path} "
                f"(expected {self.path.depth})"
            )
        expected_parent = ids[-2] if len(ids) > 1 else None
        if self.parent_id != expected_parent:
            raise ValueError(
                f"Parent {self.parent_id} does not match path {self.path}"
            )
        return self


class CommentRecord(Comment):
    """A comment as read from the thread store.

    Carries the raw vote and reaction rows so scores can be computed from the
    live vote set on every read.
    """

    author_username: Optional[str] = None
    votes: list[Vote] = Field(default_factory=list)
    reactions: list[Reaction] = Field(default_factory=list)
    reply_count: int = Field(default=0, ge=0)


class CommentAuthor(DomainModel):
    """Author details attached to a ranked comment."""

    id: UserId
    username: Optional[str] = None
    image_url: Optional[str] = None


class RankedComment(Comment):
    """A comment with computed scores and its nested replies.

    Rebuilt on every read, never persisted.
    """

    author: CommentAuthor
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    score: int = 0
    wilson_score: float = Field(default=0.0, ge=0.0, le=1.0)
    user_vote: Optional[VoteValue] = None
    reactions: list[Reaction] = Field(default_factory=list)
    reply_count: int = Field(default=0, ge=0)
    replies: list["RankedComment"] = Field(default_factory=list)


class CommentStats(DomainModel):
    """Aggregate figures for one discussion."""

    total_comments: int = Field(default=0, ge=0)
    top_level_comments: int = Field(default=0, ge=0)
    max_depth: int = Field(default=0, ge=0)
