"""Unit tests for BoardService."""

from uuid import uuid4

import pytest

from voter.domain.error import InvalidConfigurationError, NotFoundError
from voter.domain.repository import SuggestionRepository, VoteRepository
from voter.domain.service import BoardService, SuggestionService, VoteService
from voter.domain.value import SuggestionStatus, UserId, VotingType
from tests.harness import create_env_fixture

# Unit test fixture - in-memory repositories
unit_env = create_env_fixture()


class TestCreateBoard:
    """Tests for create_board method."""

    @pytest.mark.asyncio
    async def test_create_board_with_defaults(self, unit_env):
        # Arrange
        service = await unit_env.get(BoardService)
        admin = UserId(uuid4())

        # Act
        board = await service.create_board("Retro topics", admin)

        # Assert
        assert board.created_by == admin
        assert board.voting_type == VotingType.SINGLE
        assert board.suggestions_open and board.voting_open and not board.closed
        assert await service.get_board(board.id) == board

    @pytest.mark.asyncio
    async def test_create_board_parses_voting_type(self, unit_env):
        service = await unit_env.get(BoardService)

        board = await service.create_board(
            "Retro topics", UserId(uuid4()), voting_type="Multiple", max_votes=3
        )

        assert board.voting_type == VotingType.MULTIPLE
        assert board.max_votes == 3

    @pytest.mark.asyncio
    async def test_create_board_with_invalid_voting_type_raises(self, unit_env):
        service = await unit_env.get(BoardService)

        with pytest.raises(InvalidConfigurationError):
            await service.create_board("Retro", UserId(uuid4()), voting_type="ranked")

    @pytest.mark.asyncio
    async def test_create_board_with_zero_max_votes_raises(self, unit_env):
        service = await unit_env.get(BoardService)

        with pytest.raises(InvalidConfigurationError):
            await service.create_board(
                "Retro", UserId(uuid4()), voting_type=VotingType.MULTIPLE, max_votes=0
            )

    @pytest.mark.asyncio
    async def test_get_missing_board_raises(self, unit_env):
        service = await unit_env.get(BoardService)

        with pytest.raises(NotFoundError):
            await service.get_board(uuid4())


class TestUpdateBoard:
    """Tests for update_board method."""

    @pytest.mark.asyncio
    async def test_update_revalidates_configuration(self, unit_env):
        # Arrange
        service = await unit_env.get(BoardService)
        board = await service.create_board(
            "Retro", UserId(uuid4()), voting_type=VotingType.MULTIPLE, max_votes=3
        )

        # Act
        updated = await service.update_board(board.id, {"voting_type": "single"})

        # Assert
        assert updated.voting_type == VotingType.SINGLE
        assert updated.max_votes is None

    @pytest.mark.asyncio
    async def test_update_with_invalid_max_votes_raises(self, unit_env):
        # Arrange
        service = await unit_env.get(BoardService)
        board = await service.create_board(
            "Retro", UserId(uuid4()), voting_type=VotingType.MULTIPLE
        )

        # Act & Assert
        with pytest.raises(InvalidConfigurationError):
            await service.update_board(board.id, {"max_votes": -2})
        assert (await service.get_board(board.id)).max_votes is None

    @pytest.mark.asyncio
    async def test_created_by_cannot_change(self, unit_env):
        service = await unit_env.get(BoardService)
        board = await service.create_board("Retro", UserId(uuid4()))

        with pytest.raises(InvalidConfigurationError, match="created_by"):
            await service.update_board(board.id, {"created_by": UserId(uuid4())})

    @pytest.mark.asyncio
    async def test_closing_through_update_closes_voting_and_suggestions(self, unit_env):
        service = await unit_env.get(BoardService)
        board = await service.create_board("Retro", UserId(uuid4()))

        updated = await service.update_board(board.id, {"closed": True})

        assert updated.closed is True
        assert updated.voting_open is False
        assert updated.suggestions_open is False

    @pytest.mark.asyncio
    async def test_dropping_approval_publishes_pending_suggestions(self, unit_env):
        # Arrange
        service = await unit_env.get(BoardService)
        suggestion_service = await unit_env.get(SuggestionService)
        suggestion_repo = await unit_env.get(SuggestionRepository)
        board = await service.create_board(
            "Retro", UserId(uuid4()), require_approval=True
        )
        pending = await suggestion_service.submit(board, "Later", UserId(uuid4()))

        # Act
        await service.update_board(board.id, {"require_approval": False})

        # Assert
        stored = await suggestion_repo.find_by_id(pending.id)
        assert stored.status == SuggestionStatus.PENDING
        assert stored.visible is True


class TestToggles:
    """Tests for toggle methods."""

    @pytest.mark.asyncio
    async def test_toggle_voting_and_suggestions(self, unit_env):
        service = await unit_env.get(BoardService)
        board = await service.create_board("Retro", UserId(uuid4()))

        assert (await service.toggle_voting(board.id)).voting_open is False
        assert (await service.toggle_voting(board.id)).voting_open is True
        assert (await service.toggle_suggestions(board.id)).suggestions_open is False

    @pytest.mark.asyncio
    async def test_close_then_reopen(self, unit_env):
        """Closing forces everything shut; reopening only clears closed."""
        # Arrange
        service = await unit_env.get(BoardService)
        board = await service.create_board("Retro", UserId(uuid4()))

        # Act
        closed = await service.toggle_closed(board.id)
        reopened = await service.toggle_closed(board.id)

        # Assert
        assert closed.closed is True
        assert closed.voting_open is False
        assert closed.suggestions_open is False
        assert reopened.closed is False
        assert reopened.voting_open is False
        assert reopened.suggestions_open is False

    @pytest.mark.asyncio
    async def test_toggle_missing_board_raises(self, unit_env):
        service = await unit_env.get(BoardService)

        with pytest.raises(NotFoundError):
            await service.toggle_voting(uuid4())


class TestDeleteBoard:
    """Tests for delete_board method."""

    @pytest.mark.asyncio
    async def test_delete_board_cascades(self, unit_env):
        # Arrange
        service = await unit_env.get(BoardService)
        suggestion_service = await unit_env.get(SuggestionService)
        vote_service = await unit_env.get(VoteService)
        suggestion_repo = await unit_env.get(SuggestionRepository)
        vote_repo = await unit_env.get(VoteRepository)
        board = await service.create_board("Retro", UserId(uuid4()))
        suggestion = await suggestion_service.submit(board, "Tacos", UserId(uuid4()))
        await vote_service.cast_vote(suggestion, board, UserId(uuid4()))

        # Act
        await service.delete_board(board.id)

        # Assert
        with pytest.raises(NotFoundError):
            await service.get_board(board.id)
        assert await suggestion_repo.find_by_board(board.id) == []
        assert await vote_repo.find_by_board(board.id) == []

    @pytest.mark.asyncio
    async def test_delete_missing_board_raises(self, unit_env):
        service = await unit_env.get(BoardService)

        with pytest.raises(NotFoundError):
            await service.delete_board(uuid4())
