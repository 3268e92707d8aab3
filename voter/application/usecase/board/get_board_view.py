"""Get board view use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from voter.application.usecase.base import BaseUseCase
from voter.domain.service import BoardViewService
from voter.domain.value import BoardId, SuggestionStatus, UserId, UserRole, Viewer

from .details import BoardDetails


class GetBoardViewRequest(BaseModel):
    """Get board view request."""

    board_id: str  # UUID string
    user_id: Optional[str] = None  # None for anonymous viewers
    is_admin: bool = False


class SuggestionItem(BaseModel):
    """Suggestion row in a board view."""

    suggestion_id: str
    text: str
    submitted_by: str
    submitted_at: datetime
    status: SuggestionStatus
    visible: bool
    vote_count: int
    user_has_voted: bool


class GetBoardViewResponse(BoardDetails):
    """Get board view response."""

    suggestion_count: int
    total_votes: int
    suggestions: list[SuggestionItem]


class GetBoardViewUseCase(BaseUseCase):
    """Use case for showing a board and its suggestions to a viewer."""

    def __init__(self, board_view_service: BoardViewService) -> None:
        """Initialize get board view use case.

        Args:
            board_view_service: Board view domain service
        """
        self.board_view_service = board_view_service

    async def execute(self, request: GetBoardViewRequest) -> GetBoardViewResponse:
        """Execute get board view flow.

        Args:
            request: Get board view request

        Returns:
            Board with the suggestions this viewer may see, most votes first

        Raises:
            NotFoundError: If the board does not exist
        """
        viewer = Viewer(
            user_id=UserId(UUID(request.user_id)) if request.user_id else None,
            role=UserRole.ADMIN if request.is_admin else UserRole.USER,
        )
        view = await self.board_view_service.get_board_view(
            BoardId(UUID(request.board_id)), viewer
        )

        return GetBoardViewResponse(
            board_id=str(view.id),
            title=view.title,
            description=view.description,
            created_by=str(view.created_by),
            suggestions_open=view.suggestions_open,
            voting_open=view.voting_open,
            closed=view.closed,
            require_approval=view.require_approval,
            voting_type=view.voting_type,
            max_votes=view.max_votes,
            created_at=view.created_at,
            suggestion_count=view.suggestion_count,
            total_votes=view.total_votes,
            suggestions=[
                SuggestionItem(
                    suggestion_id=str(s.id),
                    text=s.text,
                    submitted_by=str(s.submitted_by),
                    submitted_at=s.submitted_at,
                    status=s.status,
                    visible=s.visible,
                    vote_count=s.vote_count,
                    user_has_voted=s.user_has_voted,
                )
                for s in view.suggestions
            ],
        )
