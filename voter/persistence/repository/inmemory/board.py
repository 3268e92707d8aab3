"""In-memory board repository for testing."""

from typing import Optional

from voter.domain.model import Board
from voter.domain.repository import BoardRepository
from voter.domain.value import BoardId


class InMemoryBoardRepository(BoardRepository):
    """In-memory implementation of BoardRepository for testing."""

    def __init__(self) -> None:
        self._boards: dict[BoardId, Board] = {}

    async def find_by_id(self, board_id: BoardId) -> Optional[Board]:
        """Find a board by ID."""
        return self._boards.get(board_id)

    async def find_all(self) -> list[Board]:
        """Find all boards, newest first."""
        return sorted(self._boards.values(), key=lambda b: b.created_at, reverse=True)

    async def save(self, board: Board) -> Board:
        """Save a board (create or update)."""
        self._boards[board.id] = board
        return board

    async def delete(self, board_id: BoardId) -> bool:
        """Delete a board."""
        return self._boards.pop(board_id, None) is not None
