"""Board repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from voter.domain.model.board import Board
from voter.domain.value import BoardId


class BoardRepository(ABC):
    """Repository for Board aggregate.

    Defines the contract for board persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, board_id: BoardId) -> Optional[Board]:
        """Find a board by ID.

        Args:
            board_id: The board's unique identifier

        Returns:
            The board if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Board]:
        """Find all boards, newest first.

        Returns:
            List of boards
        """
        pass

    @abstractmethod
    async def save(self, board: Board) -> Board:
        """Save a board (create or update).

        Args:
            board: The board to save

        Returns:
            The saved board
        """
        pass

    @abstractmethod
    async def delete(self, board_id: BoardId) -> bool:
        """Delete a board (hard delete).

        Args:
            board_id: The board ID to delete

        Returns:
            True if a board was deleted, False if it did not exist
        """
        pass
