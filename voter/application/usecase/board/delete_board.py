"""Delete board use case."""

from uuid import UUID

from pydantic import BaseModel

from voter.application.usecase.base import AdminRequest, BaseUseCase, ensure_admin
from voter.domain.service import BoardService
from voter.domain.value import BoardId


class DeleteBoardRequest(AdminRequest):
    """Delete board request."""

    board_id: str  # UUID string


class DeleteBoardResponse(BaseModel):
    """Delete board response."""

    success: bool
    message: str


class DeleteBoardUseCase(BaseUseCase):
    """Use case for deleting a board with all its suggestions and votes."""

    def __init__(self, board_service: BoardService) -> None:
        self.board_service = board_service

    async def execute(self, request: DeleteBoardRequest) -> DeleteBoardResponse:
        """Execute delete board flow.

        Raises:
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If the board does not exist
        """
        ensure_admin(request, "delete boards")

        await self.board_service.delete_board(BoardId(UUID(request.board_id)))
        return DeleteBoardResponse(success=True, message="Board deleted")
