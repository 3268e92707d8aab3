"""Vote entity.

A vote is one user's endorsement of one suggestion.
"""

from datetime import datetime

from pydantic import Field

from voter.domain.model.common import DomainModel
from voter.domain.value import BoardId, SuggestionId, UserId, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per suggestion (enforced by database unique constraint)
    - Tallies are never stored; a suggestion's count is the size of its vote set
    """

    id: VoteId
    suggestion_id: SuggestionId
    board_id: BoardId  # Denormalized from suggestion for per-board counts
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
