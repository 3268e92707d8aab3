"""Review suggestion use case."""

from typing import Literal
from uuid import UUID

from voter.application.usecase.base import AdminRequest, BaseUseCase, ensure_admin
from voter.domain.service import SuggestionService
from voter.domain.value import SuggestionId

from .details import SuggestionDetails


class ReviewSuggestionRequest(AdminRequest):
    """Review suggestion request."""

    suggestion_id: str  # UUID string
    decision: Literal["approve", "reject"]


class ReviewSuggestionResponse(SuggestionDetails):
    """Review suggestion response."""


class ReviewSuggestionUseCase(BaseUseCase):
    """Use case for approving or rejecting a pending suggestion."""

    def __init__(self, suggestion_service: SuggestionService) -> None:
        """Initialize review suggestion use case.

        Args:
            suggestion_service: Suggestion domain service
        """
        self.suggestion_service = suggestion_service

    async def execute(self, request: ReviewSuggestionRequest) -> ReviewSuggestionResponse:
        """Execute review suggestion flow.

        Raises:
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If the suggestion does not exist
            InvalidTransitionError: If the suggestion was already reviewed
        """
        ensure_admin(request, f"{request.decision} suggestions")

        suggestion = await self.suggestion_service.get_suggestion(
            SuggestionId(UUID(request.suggestion_id))
        )
        if request.decision == "approve":
            reviewed = await self.suggestion_service.approve(suggestion)
        else:
            reviewed = await self.suggestion_service.reject(suggestion)

        return ReviewSuggestionResponse.from_suggestion(reviewed)
