"""Vote repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import List, Optional

from voter.domain.model.vote import Vote
from voter.domain.value import BoardId, SuggestionId, UserId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_user_and_suggestion(
        self, user_id: UserId, suggestion_id: SuggestionId
    ) -> Optional[Vote]:
        """Find a user's vote on a specific suggestion.

        Args:
            user_id: The user's ID
            suggestion_id: The suggestion's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_board(self, board_id: BoardId) -> List[Vote]:
        """Find all votes on a board's suggestions.

        Args:
            board_id: The board's ID

        Returns:
            List of votes on the board
        """
        pass

    @abstractmethod
    async def find_by_user_and_board(
        self, user_id: UserId, board_id: BoardId
    ) -> List[Vote]:
        """Find a user's votes within a board.

        Args:
            user_id: The user's ID
            board_id: The board's ID

        Returns:
            List of the user's votes on the board
        """
        pass

    @abstractmethod
    async def count_by_user_and_board(self, user_id: UserId, board_id: BoardId) -> int:
        """Count a user's votes within a board.

        Args:
            user_id: The user's ID
            board_id: The board's ID

        Returns:
            Number of votes
        """
        pass

    @abstractmethod
    async def count_by_suggestion(self, suggestion_id: SuggestionId) -> int:
        """Count votes on a suggestion.

        Args:
            suggestion_id: The suggestion's ID

        Returns:
            Number of votes
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        The insert is atomic with respect to the one-vote-per-(suggestion, user)
        rule: if a vote for the pair already exists, nothing is written.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If a vote already exists for the pair
        """
        pass

    @abstractmethod
    async def delete_by_user_and_suggestion(
        self, user_id: UserId, suggestion_id: SuggestionId
    ) -> bool:
        """Delete a user's vote on a suggestion.

        Args:
            user_id: The user's ID
            suggestion_id: The suggestion's ID

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def delete_by_suggestion(self, suggestion_id: SuggestionId) -> int:
        """Delete all votes on a suggestion.

        Args:
            suggestion_id: The suggestion's ID

        Returns:
            Number of votes deleted
        """
        pass

    @abstractmethod
    async def delete_by_board(self, board_id: BoardId) -> int:
        """Delete all votes on a board's suggestions.

        Args:
            board_id: The board's ID

        Returns:
            Number of votes deleted
        """
        pass

    @abstractmethod
    def lock_ballot(
        self, board_id: BoardId, user_id: UserId
    ) -> AbstractAsyncContextManager[None]:
        """Serialize vote casting for one user on one board.

        While the returned context is held, no other caller can hold the lock
        for the same (board, user) key. Used to make the vote-limit count and
        the insert a single unit.

        Args:
            board_id: The board's ID
            user_id: The user's ID

        Returns:
            Async context manager holding the lock
        """
        pass
