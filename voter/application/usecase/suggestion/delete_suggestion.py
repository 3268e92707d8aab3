"""Delete suggestion use case."""

from uuid import UUID

from pydantic import BaseModel

from voter.application.usecase.base import AdminRequest, BaseUseCase, ensure_admin
from voter.domain.service import SuggestionService
from voter.domain.value import SuggestionId


class DeleteSuggestionRequest(AdminRequest):
    """Delete suggestion request."""

    suggestion_id: str  # UUID string


class DeleteSuggestionResponse(BaseModel):
    """Delete suggestion response."""

    success: bool
    message: str


class DeleteSuggestionUseCase(BaseUseCase):
    """Use case for removing a suggestion and its votes."""

    def __init__(self, suggestion_service: SuggestionService) -> None:
        """Initialize delete suggestion use case.

        Args:
            suggestion_service: Suggestion domain service
        """
        self.suggestion_service = suggestion_service

    async def execute(self, request: DeleteSuggestionRequest) -> DeleteSuggestionResponse:
        """Execute delete suggestion flow.

        Raises:
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If the suggestion does not exist
        """
        ensure_admin(request, "delete suggestions")

        await self.suggestion_service.delete_suggestion(
            SuggestionId(UUID(request.suggestion_id))
        )
        return DeleteSuggestionResponse(success=True, message="Suggestion deleted")
