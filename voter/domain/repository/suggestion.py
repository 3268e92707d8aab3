"""Suggestion repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from voter.domain.model.suggestion import Suggestion
from voter.domain.value import BoardId, SuggestionId, SuggestionStatus


class SuggestionRepository(ABC):
    """Repository for Suggestion entity.

    Defines the contract for suggestion persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, suggestion_id: SuggestionId) -> Optional[Suggestion]:
        """Find a suggestion by ID.

        Args:
            suggestion_id: The suggestion's unique identifier

        Returns:
            The suggestion if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_board(self, board_id: BoardId) -> List[Suggestion]:
        """Find all suggestions on a board in submission order (oldest first).

        Args:
            board_id: The board's ID

        Returns:
            List of suggestions regardless of status
        """
        pass

    @abstractmethod
    async def find_pending(self, board_id: Optional[BoardId] = None) -> List[Suggestion]:
        """Find suggestions awaiting moderation, oldest first.

        Args:
            board_id: Restrict to one board (None for all boards)

        Returns:
            List of pending suggestions
        """
        pass

    @abstractmethod
    async def save(self, suggestion: Suggestion) -> Suggestion:
        """Save a suggestion (create or update).

        Args:
            suggestion: The suggestion to save

        Returns:
            The saved suggestion
        """
        pass

    @abstractmethod
    async def update_status(
        self,
        suggestion_id: SuggestionId,
        expected: SuggestionStatus,
        status: SuggestionStatus,
        visible: bool,
    ) -> Optional[Suggestion]:
        """Atomically move a suggestion from one status to another.

        The update only applies if the stored status still equals
        ``expected`` (compare-and-set), so two racing transitions
        cannot both succeed.

        Args:
            suggestion_id: The suggestion's ID
            expected: Status the suggestion must currently have
            status: New status
            visible: New visibility flag

        Returns:
            Updated suggestion, or None if it is missing or its status changed
        """
        pass

    @abstractmethod
    async def update_visibility(
        self,
        board_id: BoardId,
        status: SuggestionStatus,
        visible: bool,
    ) -> int:
        """Set the visibility of every suggestion on a board with a given status.

        Args:
            board_id: The board's ID
            status: Only suggestions with this status are touched
            visible: New visibility flag

        Returns:
            Number of suggestions updated
        """
        pass

    @abstractmethod
    async def delete(self, suggestion_id: SuggestionId) -> bool:
        """Delete a suggestion (hard delete).

        Args:
            suggestion_id: The suggestion ID to delete

        Returns:
            True if a suggestion was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def delete_by_board(self, board_id: BoardId) -> int:
        """Delete every suggestion on a board.

        Args:
            board_id: The board's ID

        Returns:
            Number of suggestions deleted
        """
        pass
