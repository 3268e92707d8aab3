"""Unit tests for RetractVoteUseCase."""

from uuid import uuid4

import pytest

from voter.application.usecase.board import CreateBoardRequest, CreateBoardUseCase
from voter.application.usecase.suggestion import (
    SubmitSuggestionRequest,
    SubmitSuggestionUseCase,
)
from voter.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    RetractVoteRequest,
    RetractVoteUseCase,
)
from voter.domain.error import VoteNotFoundError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRetractVoteUseCase:
    """Tests for RetractVoteUseCase."""

    @pytest.mark.asyncio
    async def test_retract_frees_the_single_vote(self, unit_env):
        """Vote, hit the limit, retract, vote elsewhere."""
        # Arrange
        create = await unit_env.get(CreateBoardUseCase)
        submit = await unit_env.get(SubmitSuggestionUseCase)
        cast = await unit_env.get(CastVoteUseCase)
        retract = await unit_env.get(RetractVoteUseCase)
        board = await create.execute(
            CreateBoardRequest(user_id=str(uuid4()), is_admin=True, title="Hack week")
        )
        a, b = [
            await submit.execute(
                SubmitSuggestionRequest(board_id=board.board_id, user_id=str(uuid4()), text=t)
            )
            for t in ("A", "B")
        ]
        user_id = str(uuid4())
        await cast.execute(CastVoteRequest(suggestion_id=a.suggestion_id, user_id=user_id))

        # Act
        response = await retract.execute(
            RetractVoteRequest(suggestion_id=a.suggestion_id, user_id=user_id)
        )
        revote = await cast.execute(
            CastVoteRequest(suggestion_id=b.suggestion_id, user_id=user_id)
        )

        # Assert
        assert response.success is True
        assert response.vote_count == 0
        assert revote.vote_count == 1

    @pytest.mark.asyncio
    async def test_retract_without_vote_raises(self, unit_env):
        create = await unit_env.get(CreateBoardUseCase)
        submit = await unit_env.get(SubmitSuggestionUseCase)
        retract = await unit_env.get(RetractVoteUseCase)
        board = await create.execute(
            CreateBoardRequest(user_id=str(uuid4()), is_admin=True, title="Hack week")
        )
        suggestion = await submit.execute(
            SubmitSuggestionRequest(board_id=board.board_id, user_id=str(uuid4()), text="A")
        )

        with pytest.raises(VoteNotFoundError):
            await retract.execute(
                RetractVoteRequest(suggestion_id=suggestion.suggestion_id, user_id=str(uuid4()))
            )
