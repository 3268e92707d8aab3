"""Read models for boards.

These are projections assembled for a particular viewer, never persisted.
"""

from datetime import datetime
from typing import Optional

from voter.domain.model.common import DomainModel
from voter.domain.value import (
    BoardId,
    SuggestionId,
    SuggestionStatus,
    UserId,
    VotingType,
)


class SuggestionView(DomainModel):
    """A suggestion as listed on a board, with its tally."""

    id: SuggestionId
    board_id: BoardId
    text: str
    submitted_by: UserId
    submitted_at: datetime
    status: SuggestionStatus
    visible: bool
    vote_count: int
    user_has_voted: bool = False


class BoardSummary(DomainModel):
    """Board-list row with public aggregates.

    suggestion_count and total_votes only count approved, visible suggestions.
    """

    id: BoardId
    title: str
    description: str
    created_by: UserId
    created_at: datetime
    suggestions_open: bool
    voting_open: bool
    closed: bool
    require_approval: bool
    voting_type: VotingType
    max_votes: Optional[int]
    suggestion_count: int
    total_votes: int


class BoardView(BoardSummary):
    """Board detail as seen by one viewer."""

    suggestions: list[SuggestionView]
