"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's imperative mapping.
"""

from typing import Any, Dict, Optional, Sequence

from showtalk.domain.model import (
    Comment,
    CommentDraft,
    CommentRecord,
    Reaction,
    ReactionType,
    Vote,
)
from showtalk.domain.value import (
    CommentId,
    CommentPath,
    DiscussionId,
    ReactionId,
    ReactionTypeId,
    UserId,
    VoteId,
    VoteValue,
)


def _comment_fields(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": CommentId(row["id"]),
        "discussion_id": DiscussionId(row["discussion_id"]),
        "author_id": UserId(row["user_id"]),
        "content": row["content"],
        "parent_id": CommentId(row["parent_id"])
        if row.get("parent_id") is not None
        else None,
        "depth": row["depth"],
        "path": CommentPath(row["path"]),
        "spoiler": row["spoiler"],
        "is_deleted": row["is_deleted"],
        "created_at": row["created_at"],
        "updated_at": row["updated_at"],
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(**_comment_fields(row))


def row_to_comment_record(
    row: Dict[str, Any],
    votes: Sequence[Vote] = (),
    reactions: Sequence[Reaction] = (),
    reply_count: int = 0,
) -> CommentRecord:
    """Convert a comment row (joined with its author) to a CommentRecord.

    Args:
        row: Database row as dict, optionally carrying ``username``
        votes: Live votes on the comment
        reactions: Reactions on the comment
        reply_count: Number of direct replies

    Returns:
        CommentRecord domain model
    """
    return CommentRecord(
        **_comment_fields(row),
        author_username=row.get("username"),
        votes=list(votes),
        reactions=list(reactions),
        reply_count=reply_count,
    )


def draft_to_dict(draft: CommentDraft, path: str) -> Dict[str, Any]:
    """Convert a CommentDraft to a database dict for insertion.

    Args:
        draft: Comment draft
        path: Path value to store

    Returns:
        Dict suitable for database insertion
    """
    return {
        "discussion_id": draft.discussion_id,
        "user_id": draft.author_id,
        "content": draft.content,
        "parent_id": draft.parent_id,
        "depth": draft.depth,
        "path": path,
        "spoiler": draft.spoiler,
        "is_deleted": False,
        "created_at": draft.created_at,
        "updated_at": draft.created_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(row["id"]),
        comment_id=CommentId(row["comment_id"]),
        user_id=UserId(row["user_id"]),
        value=VoteValue(row["value"]),
        created_at=row["created_at"],
    )


def row_to_reaction_type(row: Dict[str, Any]) -> ReactionType:
    """Convert database row to ReactionType domain model."""
    return ReactionType(
        id=ReactionTypeId(row["id"]),
        name=row["name"],
        emoji=row.get("emoji"),
        category=row.get("category"),
    )


def row_to_reaction(
    row: Dict[str, Any], reaction_type: Optional[ReactionType] = None
) -> Reaction:
    """Convert a reaction row to a Reaction domain model.

    Args:
        row: Reaction row, joined with reaction_types columns (``type_name``,
            ``type_emoji``, ``type_category``) when reaction_type is omitted
        reaction_type: Already loaded reaction type

    Returns:
        Reaction domain model
    """
    if reaction_type is None:
        reaction_type = ReactionType(
            id=ReactionTypeId(row["reaction_type_id"]),
            name=row["type_name"],
            emoji=row.get("type_emoji"),
            category=row.get("type_category"),
        )
    return Reaction(
        id=ReactionId(row["id"]),
        comment_id=CommentId(row["comment_id"]),
        user_id=UserId(row["user_id"]),
        reaction_type=reaction_type,
        created_at=row["created_at"],
    )
