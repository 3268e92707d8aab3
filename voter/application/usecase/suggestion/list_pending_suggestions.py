"""List pending suggestions use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from voter.application.usecase.base import AdminRequest, BaseUseCase, ensure_admin
from voter.domain.service import SuggestionService
from voter.domain.value import BoardId

from .details import SuggestionDetails


class ListPendingSuggestionsRequest(AdminRequest):
    """List pending suggestions request."""

    board_id: Optional[str] = None  # None for every board


class ListPendingSuggestionsResponse(BaseModel):
    """List pending suggestions response."""

    suggestions: list[SuggestionDetails]


class ListPendingSuggestionsUseCase(BaseUseCase):
    """Use case for the moderation queue."""

    def __init__(self, suggestion_service: SuggestionService) -> None:
        self.suggestion_service = suggestion_service

    async def execute(
        self, request: ListPendingSuggestionsRequest
    ) -> ListPendingSuggestionsResponse:
        """Execute list pending suggestions flow.

        Returns:
            Pending suggestions, oldest first

        Raises:
            NotAuthorizedError: If the caller is not an admin
        """
        ensure_admin(request, "review suggestions")

        board_id = BoardId(UUID(request.board_id)) if request.board_id else None
        pending = await self.suggestion_service.list_pending(board_id)
        return ListPendingSuggestionsResponse(
            suggestions=[SuggestionDetails.from_suggestion(s) for s in pending]
        )
