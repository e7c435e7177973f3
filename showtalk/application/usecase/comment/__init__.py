"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comment_stats import GetCommentStatsRequest, GetCommentStatsUseCase
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .get_thread import GetThreadRequest, GetThreadResponse, GetThreadUseCase
from .views import CommentNode, CommentStatsItem

__all__ = [
    "CommentNode",
    "CommentStatsItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentStatsRequest",
    "GetCommentStatsUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
]
