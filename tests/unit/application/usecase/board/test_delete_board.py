"""Unit tests for DeleteBoardUseCase."""

from uuid import uuid4

import pytest

from voter.application.usecase.board import (
    CreateBoardRequest,
    CreateBoardUseCase,
    DeleteBoardRequest,
    DeleteBoardUseCase,
)
from voter.domain.error import NotAuthorizedError, NotFoundError
from voter.domain.repository import BoardRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeleteBoardUseCase:
    """Tests for DeleteBoardUseCase."""

    @pytest.mark.asyncio
    async def test_admin_deletes_board(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateBoardUseCase)
        delete = await unit_env.get(DeleteBoardUseCase)
        board_repo = await unit_env.get(BoardRepository)
        admin_id = str(uuid4())
        board = await create.execute(
            CreateBoardRequest(user_id=admin_id, is_admin=True, title="Hack week")
        )

        # Act
        response = await delete.execute(
            DeleteBoardRequest(board_id=board.board_id, user_id=admin_id, is_admin=True)
        )

        # Assert
        assert response.success is True
        assert await board_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_non_admin_is_refused(self, unit_env):
        delete = await unit_env.get(DeleteBoardUseCase)

        with pytest.raises(NotAuthorizedError):
            await delete.execute(
                DeleteBoardRequest(board_id=str(uuid4()), user_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_missing_board_raises(self, unit_env):
        delete = await unit_env.get(DeleteBoardUseCase)

        with pytest.raises(NotFoundError):
            await delete.execute(
                DeleteBoardRequest(
                    board_id=str(uuid4()), user_id=str(uuid4()), is_admin=True
                )
            )
