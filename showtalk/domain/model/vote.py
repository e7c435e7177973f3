"""Vote entity.

Votes are directional (up or down). Each user holds at most one live vote
per comment; changing direction replaces the existing vote.
"""

from showtalk.domain.model.common import CreatedModel
from showtalk.domain.value import CommentId, UserId, VoteId, VoteValue


class Vote(CreatedModel):
    """One user's opinion on one comment."""

    id: VoteId
    comment_id: CommentId
    user_id: UserId
    value: VoteValue
