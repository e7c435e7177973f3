"""Strongly typed identifiers for showtalk domain entities.

Comment-side rows use storage-assigned integer ids. Users are owned by the
external identity provider, so their ids are opaque strings.
"""

from typing import NewType

UserId = NewType("UserId", str)
DiscussionId = NewType("DiscussionId", int)
CommentId = NewType("CommentId", int)
VoteId = NewType("VoteId", int)
ReactionId = NewType("ReactionId", int)
ReactionTypeId = NewType("ReactionTypeId", int)
