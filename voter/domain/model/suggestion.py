"""Suggestion entity.

Suggestions are short text items submitted to a board. Depending on the
board's settings they are published immediately or wait for an admin to
approve them.
"""

from datetime import datetime

from pydantic import Field

from voter.domain.model.common import DomainModel
from voter.domain.value import BoardId, SuggestionId, SuggestionStatus, UserId


class Suggestion(DomainModel):
    """Suggestion entity.

    Business rules:
    - board_id and submitted_by are fixed at creation
    - visible is stored but derived: approved suggestions are visible,
      pending ones only when the board does not require approval,
      rejected ones never
    - rejected is terminal; approved is only reachable from pending
    """

    id: SuggestionId
    board_id: BoardId
    text: str = Field(min_length=1, max_length=500)
    submitted_by: UserId
    status: SuggestionStatus = SuggestionStatus.PENDING
    visible: bool = False
    submitted_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_votable(self) -> bool:
        """Whether votes may be cast on this suggestion (ignoring board state)."""
        return self.status == SuggestionStatus.APPROVED and self.visible
