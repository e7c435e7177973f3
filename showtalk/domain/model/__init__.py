"""Domain model entities for showtalk."""

from showtalk.domain.model.comment import (
    MAX_COMMENT_DEPTH,
    MAX_COMMENT_LENGTH,
    Comment,
    CommentAuthor,
    CommentDraft,
    CommentRecord,
    CommentStats,
    RankedComment,
)
from showtalk.domain.model.reaction import Reaction, ReactionType
from showtalk.domain.model.vote import Vote

__all__ = [
    "MAX_COMMENT_DEPTH",
    "MAX_COMMENT_LENGTH",
    "Comment",
    "CommentAuthor",
    "CommentDraft",
    "CommentRecord",
    "CommentStats",
    "RankedComment",
    "Reaction",
    "ReactionType",
    "Vote",
]
