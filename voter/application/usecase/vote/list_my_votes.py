"""List my votes use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from voter.application.usecase.base import BaseUseCase
from voter.domain.service import BoardService, VoteService
from voter.domain.value import BoardId, UserId


class ListMyVotesRequest(BaseModel):
    """List my votes request."""

    board_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class MyVoteItem(BaseModel):
    """One of the user's votes on the board."""

    vote_id: str
    suggestion_id: str
    created_at: datetime


class ListMyVotesResponse(BaseModel):
    """List my votes response."""

    board_id: str
    votes: list[MyVoteItem]
    votes_remaining: int | None  # None when the board has no cap


class ListMyVotesUseCase(BaseUseCase):
    """Use case for showing a user their ballot on a board."""

    def __init__(self, board_service: BoardService, vote_service: VoteService) -> None:
        self.board_service = board_service
        self.vote_service = vote_service

    async def execute(self, request: ListMyVotesRequest) -> ListMyVotesResponse:
        """Execute list my votes flow.

        Raises:
            NotFoundError: If the board does not exist
        """
        board = await self.board_service.get_board(BoardId(UUID(request.board_id)))
        votes = await self.vote_service.get_user_votes_on_board(
            board.id, UserId(UUID(request.user_id))
        )
        votes = sorted(votes, key=lambda v: v.created_at)

        limit = board.vote_limit
        return ListMyVotesResponse(
            board_id=str(board.id),
            votes=[
                MyVoteItem(
                    vote_id=str(v.id),
                    suggestion_id=str(v.suggestion_id),
                    created_at=v.created_at,
                )
                for v in votes
            ],
            votes_remaining=None if limit is None else max(limit - len(votes), 0),
        )
