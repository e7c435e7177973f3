"""Delete comment use case."""

from datetime import datetime

from pydantic import BaseModel

from showtalk.domain.service import CommentService
from showtalk.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int
    user_id: str  # User ID from authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: int
    is_deleted: bool
    updated_at: datetime


class DeleteCommentUseCase:
    """Use case for soft deleting one's own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Args:
            request: Delete comment request

        Returns:
            Delete comment response

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the comment's author
            ContentDeletedException: If the comment is already deleted
        """
        comment = await self.comment_service.delete_comment(
            CommentId(request.comment_id), UserId(request.user_id)
        )
        return DeleteCommentResponse(
            comment_id=comment.id,
            is_deleted=comment.is_deleted,
            updated_at=comment.updated_at,
        )
