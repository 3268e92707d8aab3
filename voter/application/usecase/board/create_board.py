"""Create board use case."""

from typing import Optional
from uuid import UUID

import logfire

from voter.application.usecase.base import AdminRequest, BaseUseCase, ensure_admin
from voter.domain.service import BoardService
from voter.domain.value import UserId

from .details import BoardDetails


class CreateBoardRequest(AdminRequest):
    """Create board request."""

    title: str
    description: str = ""
    suggestions_open: bool = True
    voting_open: bool = True
    require_approval: bool = False
    voting_type: str = "single"  # "single" or "multiple", any case
    max_votes: Optional[int] = None


class CreateBoardResponse(BoardDetails):
    """Create board response."""


class CreateBoardUseCase(BaseUseCase):
    """Use case for creating a new board."""

    def __init__(self, board_service: BoardService) -> None:
        """Initialize create board use case.

        Args:
            board_service: Board domain service
        """
        self.board_service = board_service

    async def execute(self, request: CreateBoardRequest) -> CreateBoardResponse:
        """Execute create board flow.

        Args:
            request: Create board request

        Returns:
            Created board

        Raises:
            NotAuthorizedError: If the caller is not an admin
            InvalidConfigurationError: If the voting configuration is invalid
        """
        ensure_admin(request, "create boards")

        with logfire.span("create_board.execute", title=request.title):
            board = await self.board_service.create_board(
                title=request.title,
                created_by=UserId(UUID(request.user_id)),
                description=request.description,
                suggestions_open=request.suggestions_open,
                voting_open=request.voting_open,
                require_approval=request.require_approval,
                voting_type=request.voting_type,
                max_votes=request.max_votes,
            )
            return CreateBoardResponse.from_board(board)
