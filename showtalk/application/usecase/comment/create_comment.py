"""Create comment use case."""

from pydantic import BaseModel, Field, field_validator

from showtalk.domain.model import MAX_COMMENT_LENGTH
from showtalk.domain.service import (
    AuthorEnrichmentService,
    CommentService,
    TreeAssembler,
)
from showtalk.domain.value import CommentId, DiscussionId, UserId

from .views import CommentNode


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    discussion_id: int
    content: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)
    author_id: str  # User ID from the identity provider
    parent_id: int | None = None  # Parent comment ID for replies
    spoiler: bool = False

    @field_validator("content", mode="before")
    @classmethod
    def strip_content(cls, v: object) -> object:
        """Surrounding whitespace does not count towards the length limits."""
        return v.strip() if isinstance(v, str) else v


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentNode


class CreateCommentUseCase:
    """Use case for commenting on a discussion or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        tree_assembler: TreeAssembler,
        author_service: AuthorEnrichmentService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            tree_assembler: Ranks the stored record for the response
            author_service: Attaches the author avatar
        """
        self.comment_service = comment_service
        self.tree_assembler = tree_assembler
        self.author_service = author_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The new comment, ranked with zero votes and the author avatar
            attached (None if the lookup fails)

        Raises:
            ParentNotFoundError: If the parent comment does not exist
            CrossDiscussionParentError: If the parent is in another discussion
            NestingTooDeepError: If the thread is too deeply nested to reply
        """
        author_id = UserId(request.author_id)
        record = await self.comment_service.create_comment(
            discussion_id=DiscussionId(request.discussion_id),
            author_id=author_id,
            content=request.content,
            parent_id=CommentId(request.parent_id)
            if request.parent_id is not None
            else None,
            spoiler=request.spoiler,
        )
        ranked = self.tree_assembler.rank(record, viewer_id=author_id)
        ranked = await self.author_service.enrich_one(ranked)
        return CreateCommentResponse(comment=CommentNode.from_domain(ranked))
