"""Board fields shared by board use case responses."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from voter.domain.model import Board
from voter.domain.value import VotingType


class BoardDetails(BaseModel):
    """Board settings as returned to callers."""

    board_id: str
    title: str
    description: str
    created_by: str
    suggestions_open: bool
    voting_open: bool
    closed: bool
    require_approval: bool
    voting_type: VotingType
    max_votes: Optional[int]
    created_at: datetime

    @classmethod
    def from_board(cls, board: Board, **extra) -> "BoardDetails":
        return cls(
            board_id=str(board.id),
            title=board.title,
            description=board.description,
            created_by=str(board.created_by),
            suggestions_open=board.suggestions_open,
            voting_open=board.voting_open,
            closed=board.closed,
            require_approval=board.require_approval,
            voting_type=board.voting_type,
            max_votes=board.max_votes,
            created_at=board.created_at,
            **extra,
        )
