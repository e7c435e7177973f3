"""Domain layer DI providers."""

from dishka import Scope, provide

from showtalk.config import CommentSettings, IdentitySettings
from showtalk.domain.repository import (
    CommentRepository,
    ReactionRepository,
    VoteRepository,
)
from showtalk.domain.service import (
    AuthorEnrichmentService,
    CommentFeedService,
    CommentService,
    IdentityProvider,
    ReactionService,
    TreeAssembler,
    VoteService,
)
from showtalk.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_tree_assembler(self) -> TreeAssembler:
        """Provide tree assembler (stateless)."""
        return TreeAssembler()

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            max_depth=comment_settings.max_depth,
        )

    @provide
    def get_comment_feed_service(
        self,
        comment_repository: CommentRepository,
        tree_assembler: TreeAssembler,
        comment_settings: CommentSettings,
    ) -> CommentFeedService:
        """Provide comment feed service."""
        return CommentFeedService(
            comment_repository=comment_repository,
            tree_assembler=tree_assembler,
            ranking_candidate_limit=comment_settings.ranking_candidate_limit,
        )

    @provide
    def get_author_enrichment_service(
        self,
        identity_provider: IdentityProvider,
        identity_settings: IdentitySettings,
    ) -> AuthorEnrichmentService:
        """Provide author enrichment service."""
        return AuthorEnrichmentService(
            identity_provider=identity_provider,
            max_concurrency=identity_settings.max_concurrent_lookups,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_reaction_service(
        self,
        reaction_repository: ReactionRepository,
        comment_repository: CommentRepository,
    ) -> ReactionService:
        """Provide reaction domain service."""
        return ReactionService(
            reaction_repository=reaction_repository,
            comment_repository=comment_repository,
        )
