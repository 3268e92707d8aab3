"""Domain services."""

from .base import Service
from .board_service import BoardService
from .board_view_service import BoardViewService
from .suggestion_service import SuggestionService, derive_visibility, is_listed_for
from .vote_service import VoteService

__all__ = [
    "BoardService",
    "BoardViewService",
    "Service",
    "SuggestionService",
    "VoteService",
    "derive_visibility",
    "is_listed_for",
]
