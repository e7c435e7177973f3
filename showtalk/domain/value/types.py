"""Domain value objects for showtalk.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum
from typing import Optional

from pydantic import ConfigDict, RootModel, field_validator

# Fixed width of every path segment. Lexicographic ordering of paths matches
# numeric ordering of ids only while ids stay below 10**PATH_SEGMENT_WIDTH.
PATH_SEGMENT_WIDTH = 6
PATH_SEPARATOR = "."

_PATH_PATTERN = re.compile(r"^\d+(\.\d+)*$")


class VoteValue(str, Enum):
    """Direction of a vote on a comment."""

    UPVOTE = "UPVOTE"
    DOWNVOTE = "DOWNVOTE"


class SortMode(str, Enum):
    """Sort order for comment listings."""

    NEW = "new"  # created_at DESC, pushed to storage
    TOP = "top"  # net score DESC, computed in memory
    BEST = "best"  # Wilson lower bound DESC, computed in memory


def pad_comment_id(comment_id: int) -> str:
    """Render a comment id as a fixed-width path segment.

    Args:
        comment_id: Storage-assigned comment id

    Returns:
        Zero-padded id (never truncated, so ids wider than the pad width
        keep their full digits)
    """
    if comment_id < 0:
        raise ValueError("Comment ids must be non-negative")
    return str(comment_id).zfill(PATH_SEGMENT_WIDTH)


class CommentPath(RootModel[str]):
    """Materialized path of a comment.

    Dot-delimited, zero-padded ancestor ids ending in the comment's own id,
    e.g. ``000012.000045.000046``. Descendant lookups become prefix matches
    and sorting by path yields tree order. ``model_dump()`` returns the bare
    string.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root

    @field_validator("root")
    @classmethod
    def validate_path_format(cls, v: str) -> str:
        """Validate path is a non-empty dot-separated list of digit runs."""
        if not _PATH_PATTERN.match(v):
            raise ValueError(f"Invalid comment path: {v!r}")
        return v

    @classmethod
    def for_comment(
        cls, comment_id: int, parent: Optional["CommentPath"] = None
    ) -> "CommentPath":
        """Build the path of a new comment from its id and its parent's path."""
        segment = pad_comment_id(comment_id)
        if parent is None:
            return cls(segment)
        return cls(f"{parent.root}{PATH_SEPARATOR}{segment}")

    @property
    def segments(self) -> list[str]:
        return self.root.split(PATH_SEPARATOR)

    @property
    def ids(self) -> list[int]:
        """Ancestor ids from the root down to (and including) this comment."""
        return [int(segment) for segment in self.segments]

    @property
    def depth(self) -> int:
        return len(self.segments) - 1

    @property
    def descendant_prefix(self) -> str:
        """Prefix shared by every descendant path (LIKE-safe: digits and dots only)."""
        return f"{self.root}{PATH_SEPARATOR}"

    def is_ancestor_of(self, other: "CommentPath") -> bool:
        return other.root.startswith(self.descendant_prefix)
