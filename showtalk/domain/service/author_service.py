"""Author enrichment for comment trees.

Avatar data lives in the external identity provider. Enrichment runs after
ranking and pagination so that only authors of returned comments are looked up.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Iterable, Optional

import logfire

from showtalk.domain.model.comment import RankedComment
from showtalk.domain.model.common import DomainModel
from showtalk.domain.value import UserId

from .base import Service

DEFAULT_MAX_CONCURRENT_LOOKUPS = 10


class IdentityProfile(DomainModel):
    """Public profile details returned by the identity provider."""

    user_id: UserId
    image_url: Optional[str] = None


class IdentityProvider(ABC):
    """Lookup-by-id boundary to the external identity service."""

    @abstractmethod
    async def get_profile(self, user_id: UserId) -> IdentityProfile:
        """Fetch the public profile of a user.

        Args:
            user_id: User ID issued by the identity provider

        Returns:
            The user's profile

        Raises:
            Exception: Any failure, independently per user id
        """
        pass


class AuthorEnrichmentService(Service):
    """Attaches avatar URLs to every author in a comment tree."""

    span_prefix = "author_service"

    def __init__(
        self,
        identity_provider: IdentityProvider,
        max_concurrency: int = DEFAULT_MAX_CONCURRENT_LOOKUPS,
    ) -> None:
        """Initialize author enrichment service.

        Args:
            identity_provider: External identity lookup
            max_concurrency: Maximum lookups in flight at once
        """
        self.identity_provider = identity_provider
        self.max_concurrency = max_concurrency

    async def enrich(self, comments: list[RankedComment]) -> list[RankedComment]:
        """Attach avatars to all comments and their nested replies.

        Each distinct author is looked up once, concurrently. A failed lookup
        leaves that author's avatar empty and never fails the call.

        Args:
            comments: Ranked comment tree

        Returns:
            The same tree (same shape and order) with author avatars set
        """
        author_ids = collect_author_ids(comments)
        if not author_ids:
            return comments

        with self.span("enrich", author_count=len(author_ids)):
            semaphore = asyncio.Semaphore(self.max_concurrency)
            avatars = await asyncio.gather(
                *(self._lookup(author_id, semaphore) for author_id in author_ids)
            )
            avatar_by_author = dict(zip(author_ids, avatars))
            return [_apply_avatars(comment, avatar_by_author) for comment in comments]

    async def enrich_one(self, comment: RankedComment) -> RankedComment:
        """Enrich a single comment tree."""
        enriched = await self.enrich([comment])
        return enriched[0]

    async def _lookup(
        self, author_id: UserId, semaphore: asyncio.Semaphore
    ) -> Optional[str]:
        async with semaphore:
            try:
                profile = await self.identity_provider.get_profile(author_id)
            except Exception as e:
                logfire.warn(
                    "Author lookup failed, continuing without avatar",
                    author_id=author_id,
                    error=str(e),
                )
                return None
        return profile.image_url


def collect_author_ids(comments: Iterable[RankedComment]) -> list[UserId]:
    """Distinct author ids across a tree, in first-seen (depth-first) order."""
    seen: dict[UserId, None] = {}
    stack = list(reversed(list(comments)))
    while stack:
        comment = stack.pop()
        seen.setdefault(comment.author.id, None)
        stack.extend(reversed(comment.replies))
    return list(seen)


def _apply_avatars(
    comment: RankedComment, avatar_by_author: dict[UserId, Optional[str]]
) -> RankedComment:
    author = comment.author.model_copy(
        update={"image_url": avatar_by_author.get(comment.author.id)}
    )
    replies = [_apply_avatars(reply, avatar_by_author) for reply in comment.replies]
    return comment.model_copy(update={"author": author, "replies": replies})
