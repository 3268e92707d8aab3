"""Unit tests for ListPendingSuggestionsUseCase."""

from uuid import uuid4

import pytest

from voter.application.usecase.board import CreateBoardRequest, CreateBoardUseCase
from voter.application.usecase.suggestion import (
    ListPendingSuggestionsRequest,
    ListPendingSuggestionsUseCase,
    SubmitSuggestionRequest,
    SubmitSuggestionUseCase,
)
from voter.domain.error import NotAuthorizedError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListPendingSuggestionsUseCase:
    """Tests for ListPendingSuggestionsUseCase."""

    @pytest.mark.asyncio
    async def test_admin_sees_queue(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateBoardUseCase)
        submit = await unit_env.get(SubmitSuggestionUseCase)
        list_pending = await unit_env.get(ListPendingSuggestionsUseCase)
        admin_id = str(uuid4())
        moderated = await create.execute(
            CreateBoardRequest(
                user_id=admin_id, is_admin=True, title="Moderated", require_approval=True
            )
        )
        open_board = await create.execute(
            CreateBoardRequest(user_id=admin_id, is_admin=True, title="Open")
        )
        waiting = await submit.execute(
            SubmitSuggestionRequest(board_id=moderated.board_id, user_id=str(uuid4()), text="Wait")
        )
        await submit.execute(
            SubmitSuggestionRequest(board_id=open_board.board_id, user_id=str(uuid4()), text="Go")
        )

        # Act
        everywhere = await list_pending.execute(
            ListPendingSuggestionsRequest(user_id=admin_id, is_admin=True)
        )
        on_open_board = await list_pending.execute(
            ListPendingSuggestionsRequest(
                user_id=admin_id, is_admin=True, board_id=open_board.board_id
            )
        )

        # Assert
        assert [s.suggestion_id for s in everywhere.suggestions] == [waiting.suggestion_id]
        assert on_open_board.suggestions == []

    @pytest.mark.asyncio
    async def test_non_admin_is_refused(self, unit_env):
        list_pending = await unit_env.get(ListPendingSuggestionsUseCase)

        with pytest.raises(NotAuthorizedError):
            await list_pending.execute(ListPendingSuggestionsRequest(user_id=str(uuid4())))
