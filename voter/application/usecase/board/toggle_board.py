"""Toggle board setting use case."""

from typing import Literal
from uuid import UUID

from voter.application.usecase.base import AdminRequest, BaseUseCase, ensure_admin
from voter.domain.service import BoardService
from voter.domain.value import BoardId

from .details import BoardDetails


class ToggleBoardRequest(AdminRequest):
    """Toggle board request."""

    board_id: str  # UUID string
    setting: Literal["voting", "suggestions", "closed"]


class ToggleBoardResponse(BoardDetails):
    """Toggle board response."""


class ToggleBoardUseCase(BaseUseCase):
    """Use case for flipping one of a board's open/closed switches."""

    def __init__(self, board_service: BoardService) -> None:
        """Initialize toggle board use case.

        Args:
            board_service: Board domain service
        """
        self.board_service = board_service

    async def execute(self, request: ToggleBoardRequest) -> ToggleBoardResponse:
        """Execute toggle board flow.

        Raises:
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If the board does not exist
        """
        ensure_admin(request, f"toggle board {request.setting}")

        board_id = BoardId(UUID(request.board_id))
        if request.setting == "voting":
            board = await self.board_service.toggle_voting(board_id)
        elif request.setting == "suggestions":
            board = await self.board_service.toggle_suggestions(board_id)
        else:
            board = await self.board_service.toggle_closed(board_id)

        return ToggleBoardResponse.from_board(board)
