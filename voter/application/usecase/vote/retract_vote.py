"""Retract vote use case."""

from uuid import UUID

from pydantic import BaseModel

from voter.application.usecase.base import BaseUseCase
from voter.domain.service import SuggestionService, VoteService
from voter.domain.value import SuggestionId, UserId


class RetractVoteRequest(BaseModel):
    """Retract vote request."""

    suggestion_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class RetractVoteResponse(BaseModel):
    """Retract vote response."""

    success: bool
    message: str
    vote_count: int


class RetractVoteUseCase(BaseUseCase):
    """Use case for taking back a vote."""

    def __init__(
        self,
        suggestion_service: SuggestionService,
        vote_service: VoteService,
    ) -> None:
        """Initialize retract vote use case.

        Args:
            suggestion_service: Suggestion domain service
            vote_service: Vote domain service
        """
        self.suggestion_service = suggestion_service
        self.vote_service = vote_service

    async def execute(self, request: RetractVoteRequest) -> RetractVoteResponse:
        """Execute retract vote flow.

        Raises:
            NotFoundError: If the suggestion does not exist
            VoteNotFoundError: If the user has no vote on the suggestion
        """
        suggestion = await self.suggestion_service.get_suggestion(
            SuggestionId(UUID(request.suggestion_id))
        )
        await self.vote_service.retract_vote(suggestion, UserId(UUID(request.user_id)))

        return RetractVoteResponse(
            success=True,
            message="Vote retracted",
            vote_count=await self.vote_service.count_votes(suggestion.id),
        )
