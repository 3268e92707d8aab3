"""Suggestion fields shared by suggestion use case responses."""

from datetime import datetime

from pydantic import BaseModel

from voter.domain.model import Suggestion
from voter.domain.value import SuggestionStatus


class SuggestionDetails(BaseModel):
    """Suggestion as returned to callers."""

    suggestion_id: str
    board_id: str
    text: str
    submitted_by: str
    submitted_at: datetime
    status: SuggestionStatus
    visible: bool

    @classmethod
    def from_suggestion(cls, suggestion: Suggestion) -> "SuggestionDetails":
        return cls(
            suggestion_id=str(suggestion.id),
            board_id=str(suggestion.board_id),
            text=suggestion.text,
            submitted_by=str(suggestion.submitted_by),
            submitted_at=suggestion.submitted_at,
            status=suggestion.status,
            visible=suggestion.visible,
        )
