"""Submit suggestion use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from voter.application.usecase.base import BaseUseCase
from voter.domain.service import BoardService, SuggestionService
from voter.domain.value import BoardId, UserId

from .details import SuggestionDetails


class SubmitSuggestionRequest(BaseModel):
    """Submit suggestion request."""

    board_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    text: str


class SubmitSuggestionResponse(SuggestionDetails):
    """Submit suggestion response."""


class SubmitSuggestionUseCase(BaseUseCase):
    """Use case for submitting a suggestion to a board."""

    def __init__(
        self,
        board_service: BoardService,
        suggestion_service: SuggestionService,
    ) -> None:
        """Initialize submit suggestion use case.

        Args:
            board_service: Board domain service
            suggestion_service: Suggestion domain service
        """
        self.board_service = board_service
        self.suggestion_service = suggestion_service

    async def execute(self, request: SubmitSuggestionRequest) -> SubmitSuggestionResponse:
        """Execute submit suggestion flow.

        Args:
            request: Submit suggestion request

        Returns:
            Created suggestion. On boards requiring approval it is pending
            and only visible to its submitter and admins.

        Raises:
            NotFoundError: If the board does not exist
            SubmissionClosedError: If the board is not accepting suggestions
        """
        board_id = BoardId(UUID(request.board_id))
        with logfire.span("submit_suggestion.execute", board_id=request.board_id):
            board = await self.board_service.get_board(board_id)
            suggestion = await self.suggestion_service.submit(
                board, request.text, UserId(UUID(request.user_id))
            )
            return SubmitSuggestionResponse.from_suggestion(suggestion)
