"""PostgreSQL repository implementations."""

from voter.persistence.repository.board import PostgresBoardRepository
from voter.persistence.repository.suggestion import PostgresSuggestionRepository
from voter.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresBoardRepository",
    "PostgresSuggestionRepository",
    "PostgresVoteRepository",
]
