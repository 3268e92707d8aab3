"""Cast vote use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from voter.application.usecase.base import BaseUseCase
from voter.domain.service import BoardService, SuggestionService, VoteService
from voter.domain.value import SuggestionId, UserId


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    suggestion_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    vote_id: str
    suggestion_id: str
    board_id: str
    vote_count: int
    created_at: datetime


class CastVoteUseCase(BaseUseCase):
    """Use case for voting on a suggestion."""

    def __init__(
        self,
        board_service: BoardService,
        suggestion_service: SuggestionService,
        vote_service: VoteService,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            board_service: Board domain service
            suggestion_service: Suggestion domain service
            vote_service: Vote domain service
        """
        self.board_service = board_service
        self.suggestion_service = suggestion_service
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Created vote and the suggestion's new vote count

        Raises:
            NotFoundError: If the suggestion or its board does not exist
            VotingClosedError: If voting is closed on the board
            BoardClosedError: If the board is closed
            SuggestionNotApprovedError: If the suggestion is not approved
            DuplicateVoteError: If the user already voted on the suggestion
            VoteLimitExceededError: If the user has no votes left on the board
        """
        suggestion_id = SuggestionId(UUID(request.suggestion_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "cast_vote.execute",
            suggestion_id=request.suggestion_id,
            user_id=request.user_id,
        ):
            suggestion = await self.suggestion_service.get_suggestion(suggestion_id)
            board = await self.board_service.get_board(suggestion.board_id)
            vote = await self.vote_service.cast_vote(suggestion, board, user_id)
            vote_count = await self.vote_service.count_votes(suggestion_id)

            return CastVoteResponse(
                vote_id=str(vote.id),
                suggestion_id=str(vote.suggestion_id),
                board_id=str(vote.board_id),
                vote_count=vote_count,
                created_at=vote.created_at,
            )
