"""Tree assembly for comment threads.

Turns raw comment records from the store into ranked comments and nests
replies under their parents. Assembly never drops, merges or reorders
nodes; ordering is the feed coordinator's job.
"""

from collections import defaultdict
from typing import Iterable, Optional, Sequence

from showtalk.domain.model.comment import (
    Comment,
    CommentAuthor,
    CommentRecord,
    RankedComment,
)
from showtalk.domain.value import CommentId, UserId, VoteValue

from .base import Service
from .scoring import tally_votes

_COMMENT_FIELDS = tuple(Comment.model_fields)


class TreeAssembler(Service):
    """Computes per-comment scores and builds reply trees."""

    def rank(
        self, record: CommentRecord, viewer_id: Optional[UserId] = None
    ) -> RankedComment:
        """Score a single record.

        Args:
            record: Comment record with its live votes
            viewer_id: Current viewer (to expose their own vote)

        Returns:
            Ranked comment without replies
        """
        tally = tally_votes(record.votes)
        return RankedComment(
            **{name: getattr(record, name) for name in _COMMENT_FIELDS},
            author=CommentAuthor(id=record.author_id, username=record.author_username),
            upvotes=tally.upvotes,
            downvotes=tally.downvotes,
            score=tally.score,
            wilson_score=tally.wilson_score,
            user_vote=self._viewer_vote(record, viewer_id),
            reactions=list(record.reactions),
            reply_count=record.reply_count,
        )

    def assemble(
        self,
        records: Sequence[CommentRecord],
        viewer_id: Optional[UserId] = None,
    ) -> list[RankedComment]:
        """Score a batch of records, preserving count and order."""
        return [self.rank(record, viewer_id) for record in records]

    def attach_replies(
        self,
        parents: Sequence[RankedComment],
        descendants: Iterable[CommentRecord],
        viewer_id: Optional[UserId] = None,
    ) -> list[RankedComment]:
        """Nest a flat, depth-bounded set of descendants under their parents.

        Args:
            parents: Already ranked comments (kept in their given order)
            descendants: Flat descendant records in path order
            viewer_id: Current viewer

        Returns:
            The parents with their reply trees filled in
        """
        children = self._group_by_parent(self.assemble(list(descendants), viewer_id))
        return [self._nest(parent, children) for parent in parents]

    def build_tree(
        self,
        records: Sequence[CommentRecord],
        viewer_id: Optional[UserId] = None,
    ) -> list[RankedComment]:
        """Build a reply tree from a flat, path-ordered set of records.

        Records whose parent is not part of the set become roots of the
        result, so partial fetches still produce a complete forest.
        """
        ranked = self.assemble(records, viewer_id)
        present = {comment.id for comment in ranked}
        roots = [
            comment
            for comment in ranked
            if comment.parent_id is None or comment.parent_id not in present
        ]
        root_ids = {root.id for root in roots}
        children = self._group_by_parent(
            comment for comment in ranked if comment.id not in root_ids
        )
        return [self._nest(root, children) for root in roots]

    @staticmethod
    def _viewer_vote(
        record: CommentRecord, viewer_id: Optional[UserId]
    ) -> Optional[VoteValue]:
        if viewer_id is None:
            return None
        for vote in record.votes:
            if vote.user_id == viewer_id:
                return vote.value
        return None

    @staticmethod
    def _group_by_parent(
        comments: Iterable[RankedComment],
    ) -> dict[CommentId, list[RankedComment]]:
        children: dict[CommentId, list[RankedComment]] = defaultdict(list)
        for comment in comments:
            if comment.parent_id is not None:
                children[comment.parent_id].append(comment)
        return children

    def _nest(
        self,
        comment: RankedComment,
        children: dict[CommentId, list[RankedComment]],
    ) -> RankedComment:
        # Depth is bounded by what the store fetched, so this terminates
        replies = [self._nest(child, children) for child in children.get(comment.id, [])]
        if not replies:
            return comment
        return comment.model_copy(update={"replies": replies})
