"""Unit tests for DeleteCommentUseCase."""

import pytest

from showtalk.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from showtalk.domain.error import NotAuthorizedError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    @pytest.mark.asyncio
    async def test_author_deletes_comment(self, unit_env):
        create = await unit_env.get(CreateCommentUseCase)
        node = (
            await create.execute(
                CreateCommentRequest(discussion_id=1, content="oops", author_id="u1")
            )
        ).comment
        use_case = await unit_env.get(DeleteCommentUseCase)

        response = await use_case.execute(
            DeleteCommentRequest(comment_id=node.comment_id, user_id="u1")
        )

        assert response.comment_id == node.comment_id
        assert response.is_deleted is True

    @pytest.mark.asyncio
    async def test_non_author_rejected(self, unit_env):
        create = await unit_env.get(CreateCommentUseCase)
        node = (
            await create.execute(
                CreateCommentRequest(discussion_id=1, content="mine", author_id="u1")
            )
        ).comment
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=node.comment_id, user_id="u2")
            )
