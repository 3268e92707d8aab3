"""List boards use case."""

import logfire
from pydantic import BaseModel

from voter.application.usecase.base import BaseUseCase
from voter.domain.service import BoardViewService

from .details import BoardDetails


class BoardListItem(BoardDetails):
    """Board row in the board list."""

    suggestion_count: int
    total_votes: int


class ListBoardsRequest(BaseModel):
    """List boards request."""


class ListBoardsResponse(BaseModel):
    """List boards response."""

    boards: list[BoardListItem]


class ListBoardsUseCase(BaseUseCase):
    """Use case for listing all boards with their public totals."""

    def __init__(self, board_view_service: BoardViewService) -> None:
        """Initialize list boards use case.

        Args:
            board_view_service: Board view domain service
        """
        self.board_view_service = board_view_service

    async def execute(self, request: ListBoardsRequest) -> ListBoardsResponse:
        """Execute list boards flow.

        Returns:
            Boards, newest first
        """
        with logfire.span("list_boards.execute"):
            summaries = await self.board_view_service.list_board_summaries()
            return ListBoardsResponse(
                boards=[
                    BoardListItem(
                        board_id=str(s.id),
                        title=s.title,
                        description=s.description,
                        created_by=str(s.created_by),
                        suggestions_open=s.suggestions_open,
                        voting_open=s.voting_open,
                        closed=s.closed,
                        require_approval=s.require_approval,
                        voting_type=s.voting_type,
                        max_votes=s.max_votes,
                        created_at=s.created_at,
                        suggestion_count=s.suggestion_count,
                        total_votes=s.total_votes,
                    )
                    for s in summaries
                ]
            )
