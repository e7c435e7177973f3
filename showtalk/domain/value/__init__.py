"""Domain value objects for showtalk."""

from showtalk.domain.value.identifiers import (
    CommentId,
    DiscussionId,
    ReactionId,
    ReactionTypeId,
    UserId,
    VoteId,
)
from showtalk.domain.value.types import (
    PATH_SEGMENT_WIDTH,
    CommentPath,
    SortMode,
    VoteValue,
    pad_comment_id,
)

__all__ = [
    # Identifiers
    "UserId",
    "DiscussionId",
    "CommentId",
    "VoteId",
    "ReactionId",
    "ReactionTypeId",
    # Types
    "PATH_SEGMENT_WIDTH",
    "CommentPath",
    "SortMode",
    "VoteValue",
    "pad_comment_id",
]
