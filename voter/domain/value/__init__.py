"""Domain value objects for board voting."""

from voter.domain.value.identifiers import (
    BoardId,
    SuggestionId,
    UserId,
    VoteId,
)
from voter.domain.value.types import (
    SuggestionStatus,
    UserRole,
    Viewer,
    VotingType,
)

__all__ = [
    # Identifiers
    "UserId",
    "BoardId",
    "SuggestionId",
    "VoteId",
    # Types
    "VotingType",
    "SuggestionStatus",
    "UserRole",
    "Viewer",
]
