"""Unit tests for SubmitSuggestionUseCase."""

from uuid import uuid4

import pytest

from voter.application.usecase.board import (
    CreateBoardRequest,
    CreateBoardUseCase,
    ToggleBoardRequest,
    ToggleBoardUseCase,
)
from voter.application.usecase.suggestion import (
    SubmitSuggestionRequest,
    SubmitSuggestionUseCase,
)
from voter.domain.error import NotFoundError, SubmissionClosedError
from voter.domain.value import SuggestionStatus
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSubmitSuggestionUseCase:
    """Tests for SubmitSuggestionUseCase."""

    @pytest.mark.asyncio
    async def test_submit_to_open_board(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateBoardUseCase)
        submit = await unit_env.get(SubmitSuggestionUseCase)
        board = await create.execute(
            CreateBoardRequest(user_id=str(uuid4()), is_admin=True, title="Hack week")
        )
        user_id = str(uuid4())

        # Act
        response = await submit.execute(
            SubmitSuggestionRequest(board_id=board.board_id, user_id=user_id, text="Drones")
        )

        # Assert
        assert response.board_id == board.board_id
        assert response.submitted_by == user_id
        assert response.status == SuggestionStatus.APPROVED
        assert response.visible is True

    @pytest.mark.asyncio
    async def test_submit_to_moderated_board_waits_for_approval(self, unit_env):
        create = await unit_env.get(CreateBoardUseCase)
        submit = await unit_env.get(SubmitSuggestionUseCase)
        board = await create.execute(
            CreateBoardRequest(
                user_id=str(uuid4()), is_admin=True, title="Hack week", require_approval=True
            )
        )

        response = await submit.execute(
            SubmitSuggestionRequest(board_id=board.board_id, user_id=str(uuid4()), text="Drones")
        )

        assert response.status == SuggestionStatus.PENDING
        assert response.visible is False

    @pytest.mark.asyncio
    async def test_submit_after_suggestions_close_raises(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateBoardUseCase)
        toggle = await unit_env.get(ToggleBoardUseCase)
        submit = await unit_env.get(SubmitSuggestionUseCase)
        admin_id = str(uuid4())
        board = await create.execute(
            CreateBoardRequest(user_id=admin_id, is_admin=True, title="Hack week")
        )
        await toggle.execute(
            ToggleBoardRequest(
                board_id=board.board_id, user_id=admin_id, is_admin=True, setting="suggestions"
            )
        )

        # Act & Assert
        with pytest.raises(SubmissionClosedError):
            await submit.execute(
                SubmitSuggestionRequest(
                    board_id=board.board_id, user_id=str(uuid4()), text="Late idea"
                )
            )

    @pytest.mark.asyncio
    async def test_submit_to_missing_board_raises(self, unit_env):
        submit = await unit_env.get(SubmitSuggestionUseCase)

        with pytest.raises(NotFoundError):
            await submit.execute(
                SubmitSuggestionRequest(
                    board_id=str(uuid4()), user_id=str(uuid4()), text="Nowhere"
                )
            )
