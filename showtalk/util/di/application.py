"""Application layer DI providers."""

from dishka import Scope, provide

from showtalk.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentStatsUseCase,
    GetCommentsUseCase,
    GetThreadUseCase,
)
from showtalk.application.usecase.reaction import (
    AddReactionUseCase,
    ListReactionTypesUseCase,
    RemoveReactionUseCase,
)
from showtalk.application.usecase.vote import CastVoteUseCase, RemoveVoteUseCase
from showtalk.config import CommentSettings
from showtalk.domain.service import (
    AuthorEnrichmentService,
    CommentFeedService,
    CommentService,
    ReactionService,
    TreeAssembler,
    VoteService,
)
from showtalk.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        tree_assembler: TreeAssembler,
        author_service: AuthorEnrichmentService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            tree_assembler=tree_assembler,
            author_service=author_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_comments_use_case(
        self,
        comment_feed_service: CommentFeedService,
        comment_service: CommentService,
        author_enrichment_service: AuthorEnrichmentService,
        comment_settings: CommentSettings,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_feed_service=comment_feed_service,
            comment_service=comment_service,
            author_enrichment_service=author_enrichment_service,
            timeout_seconds=comment_settings.fetch_timeout_seconds,
        )

    @provide(scope=Scope.REQUEST)
    def get_comment_stats_use_case(
        self, comment_service: CommentService
    ) -> GetCommentStatsUseCase:
        """Provide get comment stats use case."""
        return GetCommentStatsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_thread_use_case(
        self,
        comment_feed_service: CommentFeedService,
        author_enrichment_service: AuthorEnrichmentService,
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            comment_feed_service=comment_feed_service,
            author_enrichment_service=author_enrichment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_vote_use_case(self, vote_service: VoteService) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(vote_service=vote_service)

    # Reaction use cases
    @provide(scope=Scope.REQUEST)
    def get_add_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> AddReactionUseCase:
        """Provide add reaction use case."""
        return AddReactionUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> RemoveReactionUseCase:
        """Provide remove reaction use case."""
        return RemoveReactionUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_list_reaction_types_use_case(
        self, reaction_service: ReactionService
    ) -> ListReactionTypesUseCase:
        """Provide list reaction types use case."""
        return ListReactionTypesUseCase(reaction_service=reaction_service)
