"""Domain model entities for board voting."""

from voter.domain.model.board import Board
from voter.domain.model.board_view import BoardSummary, BoardView, SuggestionView
from voter.domain.model.suggestion import Suggestion
from voter.domain.model.vote import Vote

__all__ = [
    "Board",
    "Suggestion",
    "Vote",
    "BoardSummary",
    "BoardView",
    "SuggestionView",
]
