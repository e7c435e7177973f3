"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Iterable, Optional, Sequence

from showtalk.domain.model import (
    Comment,
    CommentDraft,
    CommentRecord,
    CommentStats,
)
from showtalk.domain.repository.comment import CommentRepository
from showtalk.domain.value import CommentId, CommentPath, DiscussionId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self.store = store or InMemoryStore()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self.store.comments.get(comment_id)

    async def create(
        self, draft: CommentDraft, parent_path: Optional[CommentPath] = None
    ) -> CommentRecord:
        """Assign an id and path, then store the comment.

        Both steps run without awaiting, so no other task sees a half-built row.
        """
        comment_id = CommentId(next(self.store.comment_ids))
        comment = Comment(
            id=comment_id,
            discussion_id=draft.discussion_id,
            author_id=draft.author_id,
            content=draft.content,
            parent_id=draft.parent_id,
            depth=draft.depth,
            path=CommentPath.for_comment(comment_id, parent_path),
            spoiler=draft.spoiler,
            created_at=draft.created_at,
            updated_at=draft.created_at,
        )
        self.store.comments[comment_id] = comment
        return self._to_record(comment)

    async def find_level(
        self,
        discussion_id: DiscussionId,
        parent_id: Optional[CommentId] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[CommentRecord]:
        """Find one thread level, newest first."""
        level = [
            c
            for c in self.store.comments.values()
            if c.discussion_id == discussion_id and c.parent_id == parent_id
        ]
        # created_at DESC, id DESC
        level.sort(key=lambda c: (c.created_at, c.id), reverse=True)
        return self._to_records(level[offset : offset + limit])

    async def find_replies(
        self,
        ancestors: Sequence[Comment],
        max_depth: int,
    ) -> list[CommentRecord]:
        """Find descendants of ancestors down to max_depth levels, in path order."""
        if not ancestors or max_depth <= 0:
            return []

        replies = [
            c
            for c in self.store.comments.values()
            if any(
                ancestor.path.is_ancestor_of(c.path)
                and c.depth <= ancestor.depth + max_depth
                for ancestor in ancestors
            )
        ]
        replies.sort(key=lambda c: c.path.root)
        return self._to_records(replies)

    async def find_by_discussion(
        self, discussion_id: DiscussionId
    ) -> list[CommentRecord]:
        """Find all comments of a discussion in tree order."""
        comments = [
            c
            for c in self.store.comments.values()
            if c.discussion_id == discussion_id
        ]
        comments.sort(key=lambda c: c.path.root)
        return self._to_records(comments)

    async def soft_delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Flag a comment as deleted."""
        comment = self.store.comments.get(comment_id)
        if comment is None:
            return None
        deleted = comment.model_copy(
            update={"is_deleted": True, "updated_at": datetime.now()}
        )
        self.store.comments[comment_id] = deleted
        return deleted

    async def get_stats(self, discussion_id: DiscussionId) -> CommentStats:
        """Aggregate counts and maximum depth."""
        comments = [
            c
            for c in self.store.comments.values()
            if c.discussion_id == discussion_id
        ]
        return CommentStats(
            total_comments=len(comments),
            top_level_comments=sum(1 for c in comments if c.parent_id is None),
            max_depth=max((c.depth for c in comments), default=0),
        )

    def _to_records(self, comments: Iterable[Comment]) -> list[CommentRecord]:
        return [self._to_record(comment) for comment in comments]

    def _to_record(self, comment: Comment) -> CommentRecord:
        store = self.store
        return CommentRecord(
            **comment.model_dump(),
            author_username=store.usernames.get(comment.author_id),
            votes=sorted(
                (v for (cid, _), v in store.votes.items() if cid == comment.id),
                key=lambda v: v.id,
            ),
            reactions=sorted(
                (r for key, r in store.reactions.items() if key[0] == comment.id),
                key=lambda r: r.id,
            ),
            reply_count=sum(
                1 for c in store.comments.values() if c.parent_id == comment.id
            ),
        )
