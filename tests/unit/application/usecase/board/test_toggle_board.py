"""Unit tests for ToggleBoardUseCase."""

from uuid import uuid4

import pytest

from voter.application.usecase.board import (
    CreateBoardRequest,
    CreateBoardUseCase,
    ToggleBoardRequest,
    ToggleBoardUseCase,
)
from voter.domain.error import NotAuthorizedError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestToggleBoardUseCase:
    """Tests for ToggleBoardUseCase."""

    @pytest.mark.asyncio
    async def test_each_setting_toggles(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateBoardUseCase)
        toggle = await unit_env.get(ToggleBoardUseCase)
        admin_id = str(uuid4())
        board = await create.execute(
            CreateBoardRequest(user_id=admin_id, is_admin=True, title="Hack week")
        )

        def request(setting):
            return ToggleBoardRequest(
                board_id=board.board_id, user_id=admin_id, is_admin=True, setting=setting
            )

        # Act & Assert
        assert (await toggle.execute(request("voting"))).voting_open is False
        assert (await toggle.execute(request("suggestions"))).suggestions_open is False
        assert (await toggle.execute(request("voting"))).voting_open is True

        closed = await toggle.execute(request("closed"))
        assert closed.closed is True
        assert closed.voting_open is False

    @pytest.mark.asyncio
    async def test_non_admin_is_refused(self, unit_env):
        toggle = await unit_env.get(ToggleBoardUseCase)

        with pytest.raises(NotAuthorizedError, match="toggle board closed"):
            await toggle.execute(
                ToggleBoardRequest(
                    board_id=str(uuid4()), user_id=str(uuid4()), setting="closed"
                )
            )
