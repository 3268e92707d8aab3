"""Update board use case."""

from typing import Optional
from uuid import UUID

from voter.application.usecase.base import AdminRequest, BaseUseCase, ensure_admin
from voter.domain.service import BoardService
from voter.domain.service.board_service import UPDATABLE_FIELDS
from voter.domain.value import BoardId

from .details import BoardDetails


class UpdateBoardRequest(AdminRequest):
    """Update board request.

    Only fields explicitly set on the request are changed. Setting
    max_votes to None removes the limit.
    """

    board_id: str  # UUID string
    title: Optional[str] = None
    description: Optional[str] = None
    suggestions_open: Optional[bool] = None
    voting_open: Optional[bool] = None
    closed: Optional[bool] = None
    require_approval: Optional[bool] = None
    voting_type: Optional[str] = None
    max_votes: Optional[int] = None


class UpdateBoardResponse(BoardDetails):
    """Update board response."""


class UpdateBoardUseCase(BaseUseCase):
    """Use case for changing a board's settings."""

    def __init__(self, board_service: BoardService) -> None:
        """Initialize update board use case.

        Args:
            board_service: Board domain service
        """
        self.board_service = board_service

    async def execute(self, request: UpdateBoardRequest) -> UpdateBoardResponse:
        """Execute update board flow.

        Raises:
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If the board does not exist
            InvalidConfigurationError: If the new configuration is invalid
        """
        ensure_admin(request, "update boards")

        changes = {
            field: getattr(request, field)
            for field in request.model_fields_set & UPDATABLE_FIELDS
        }
        board = await self.board_service.update_board(
            BoardId(UUID(request.board_id)), changes
        )
        return UpdateBoardResponse.from_board(board)
