"""Domain services."""

from .author_service import (
    AuthorEnrichmentService,
    IdentityProfile,
    IdentityProvider,
    collect_author_ids,
)
from .base import Service
from .comment_feed_service import CommentFeedService
from .comment_service import CommentService
from .reaction_service import ReactionService
from .scoring import WILSON_Z, VoteTally, net_score, tally_votes, wilson_score
from .tree_assembler import TreeAssembler
from .vote_service import VoteService

__all__ = [
    "AuthorEnrichmentService",
    "CommentFeedService",
    "CommentService",
    "IdentityProfile",
    "IdentityProvider",
    "ReactionService",
    "Service",
    "TreeAssembler",
    "VoteService",
    "VoteTally",
    "WILSON_Z",
    "collect_author_ids",
    "net_score",
    "tally_votes",
    "wilson_score",
]
