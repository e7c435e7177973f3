"""Response shapes shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from showtalk.domain.model import RankedComment, Reaction


class AuthorItem(BaseModel):
    """Comment author in response."""

    user_id: str
    username: str | None
    image_url: str | None


class ReactionItem(BaseModel):
    """Reaction in response."""

    reaction_id: int
    user_id: str
    reaction_type_id: int
    name: str
    emoji: str | None

    @classmethod
    def from_domain(cls, reaction: Reaction) -> "ReactionItem":
        return cls(
            reaction_id=reaction.id,
            user_id=reaction.user_id,
            reaction_type_id=reaction.reaction_type.id,
            name=reaction.reaction_type.name,
            emoji=reaction.reaction_type.emoji,
        )


class CommentNode(BaseModel):
    """Ranked comment with its nested replies."""

    comment_id: int
    discussion_id: int
    parent_id: int | None
    author: AuthorItem
    content: str
    spoiler: bool
    is_deleted: bool
    depth: int
    path: str
    upvotes: int
    downvotes: int
    score: int
    wilson_score: float
    user_vote: str | None
    reactions: list[ReactionItem]
    reply_count: int
    replies: list["CommentNode"]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, comment: RankedComment) -> "CommentNode":
        """Convert a ranked comment tree to its response shape."""
        return cls(
            comment_id=comment.id,
            discussion_id=comment.discussion_id,
            parent_id=comment.parent_id,
            author=AuthorItem(
                user_id=comment.author.id,
                username=comment.author.username,
                image_url=comment.author.image_url,
            ),
            content=comment.content,
            spoiler=comment.spoiler,
            is_deleted=comment.is_deleted,
            depth=comment.depth,
            path=str(comment.path),
            upvotes=comment.upvotes,
            downvotes=comment.downvotes,
            score=comment.score,
            wilson_score=comment.wilson_score,
            user_vote=comment.user_vote.value if comment.user_vote else None,
            reactions=[ReactionItem.from_domain(r) for r in comment.reactions],
            reply_count=comment.reply_count,
            replies=[cls.from_domain(reply) for reply in comment.replies],
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CommentStatsItem(BaseModel):
    """Discussion comment statistics in response."""

    total_comments: int
    top_level_comments: int
    max_depth: int
