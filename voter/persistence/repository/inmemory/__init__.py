"""In-memory repository implementations for testing."""

from .board import InMemoryBoardRepository
from .suggestion import InMemorySuggestionRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryBoardRepository",
    "InMemorySuggestionRepository",
    "InMemoryVoteRepository",
]
