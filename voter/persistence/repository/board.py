"""PostgreSQL implementation of Board repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from voter.domain.model import Board
from voter.domain.repository import BoardRepository
from voter.domain.value import BoardId
from voter.persistence.mappers import board_to_dict, row_to_board
from voter.persistence.tables import boards_table


class PostgresBoardRepository(BoardRepository):
    """PostgreSQL implementation of BoardRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, board_id: BoardId) -> Optional[Board]:
        """Find a board by ID."""
        stmt = select(boards_table).where(boards_table.c.id == board_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_board(row._asdict()) if row else None

    async def find_all(self) -> List[Board]:
        """Find all boards, newest first."""
        stmt = select(boards_table).order_by(boards_table.c.created_at.desc())
        result = await self.session.execute(stmt)
        return [row_to_board(row._asdict()) for row in result.fetchall()]

    async def save(self, board: Board) -> Board:
        """Save a board (create or update)."""
        with logfire.span("board_repository.save", board_id=str(board.id)):
            values = board_to_dict(board)
            stmt = insert(boards_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[boards_table.c.id],
                # created_by and created_at never change
                set_={
                    k: v
                    for k, v in values.items()
                    if k not in ("id", "created_by", "created_at")
                },
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return board

    async def delete(self, board_id: BoardId) -> bool:
        """Delete a board. Suggestions and votes cascade in the database."""
        stmt = delete(boards_table).where(boards_table.c.id == board_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
