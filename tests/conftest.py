"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from typing import Optional, Sequence

from showtalk.domain.model import CommentRecord, Vote
from showtalk.domain.repository import VoteRepository
from showtalk.domain.value import (
    CommentId,
    CommentPath,
    DiscussionId,
    UserId,
    VoteId,
    VoteValue,
)

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


def make_votes(
    comment_id: int, upvotes: int = 0, downvotes: int = 0, start_id: int = 1
) -> list[Vote]:
    """Build a vote set with the given counts, one distinct voter per vote."""
    votes = []
    for i in range(upvotes + downvotes):
        value = VoteValue.UPVOTE if i < upvotes else VoteValue.DOWNVOTE
        votes.append(
            Vote(
                id=VoteId(start_id + i),
                comment_id=CommentId(comment_id),
                user_id=UserId(f"voter_{comment_id}_{i}"),
                value=value,
                created_at=BASE_TIME,
            )
        )
    return votes


def make_record(
    comment_id: int,
    parent_path: Optional[str] = None,
    discussion_id: int = 1,
    author_id: str = "user_author",
    username: Optional[str] = None,
    votes: Sequence[Vote] = (),
    content: Optional[str] = None,
    minutes: int = 0,
    reply_count: int = 0,
) -> CommentRecord:
    """Build a comment record whose parent, depth and path agree.

    Args:
        comment_id: Id of the comment
        parent_path: Path of the parent (None for a top-level comment)
        minutes: Offset of created_at from BASE_TIME
    """
    parent = CommentPath(parent_path) if parent_path else None
    path = CommentPath.for_comment(comment_id, parent)
    created_at = BASE_TIME + timedelta(minutes=minutes)
    return CommentRecord(
        id=CommentId(comment_id),
        discussion_id=DiscussionId(discussion_id),
        author_id=UserId(author_id),
        content=content or f"Comment {comment_id}",
        parent_id=CommentId(parent.ids[-1]) if parent else None,
        depth=path.depth,
        path=path,
        created_at=created_at,
        updated_at=created_at,
        author_username=username,
        votes=list(votes),
        reply_count=reply_count,
    )


async def cast_votes(
    vote_repo: VoteRepository, comment_id: int, upvotes: int = 0, downvotes: int = 0
) -> None:
    """Store upvotes and downvotes from distinct users on a comment."""
    for i in range(upvotes):
        await vote_repo.upsert(
            UserId(f"up_{comment_id}_{i}"), CommentId(comment_id), VoteValue.UPVOTE
        )
    for i in range(downvotes):
        await vote_repo.upsert(
            UserId(f"down_{comment_id}_{i}"), CommentId(comment_id), VoteValue.DOWNVOTE
        )
