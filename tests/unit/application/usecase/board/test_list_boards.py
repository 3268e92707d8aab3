"""Unit tests for ListBoardsUseCase."""

from uuid import uuid4

import pytest

from voter.application.usecase.board import (
    CreateBoardRequest,
    CreateBoardUseCase,
    ListBoardsRequest,
    ListBoardsUseCase,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListBoardsUseCase:
    """Tests for ListBoardsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_every_board(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateBoardUseCase)
        list_boards = await unit_env.get(ListBoardsUseCase)
        admin_id = str(uuid4())
        for title in ("First", "Second"):
            await create.execute(
                CreateBoardRequest(user_id=admin_id, is_admin=True, title=title)
            )

        # Act
        response = await list_boards.execute(ListBoardsRequest())

        # Assert
        assert {b.title for b in response.boards} == {"First", "Second"}
        assert all(b.suggestion_count == 0 for b in response.boards)
        assert all(b.total_votes == 0 for b in response.boards)

    @pytest.mark.asyncio
    async def test_empty(self, unit_env):
        list_boards = await unit_env.get(ListBoardsUseCase)

        response = await list_boards.execute(ListBoardsRequest())

        assert response.boards == []
