"""Repository interfaces for the board voting domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from voter.domain.repository.board import BoardRepository
from voter.domain.repository.suggestion import SuggestionRepository
from voter.domain.repository.vote import VoteRepository

__all__ = [
    "BoardRepository",
    "SuggestionRepository",
    "VoteRepository",
]
