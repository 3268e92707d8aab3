"""Mock persistence providers for testing."""

from dishka import Scope, provide

from voter.domain.repository import (
    BoardRepository,
    SuggestionRepository,
    VoteRepository,
)
from voter.persistence.repository.inmemory import (
    InMemoryBoardRepository,
    InMemorySuggestionRepository,
    InMemoryVoteRepository,
)
from voter.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_board_repository(self) -> BoardRepository:
        """Provide in-memory board repository."""
        return InMemoryBoardRepository()

    @provide(scope=Scope.REQUEST)
    def get_suggestion_repository(self) -> SuggestionRepository:
        """Provide in-memory suggestion repository."""
        return InMemorySuggestionRepository()

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()
