"""PostgreSQL implementation of Suggestion repository."""

from typing import List, Optional

import logfire
from sqlalchemy import and_, delete, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from voter.domain.model import Suggestion
from voter.domain.repository import SuggestionRepository
from voter.domain.value import BoardId, SuggestionId, SuggestionStatus
from voter.persistence.mappers import row_to_suggestion, suggestion_to_dict
from voter.persistence.tables import suggestions_table


class PostgresSuggestionRepository(SuggestionRepository):
    """PostgreSQL implementation of SuggestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, suggestion_id: SuggestionId) -> Optional[Suggestion]:
        """Find a suggestion by ID."""
        stmt = select(suggestions_table).where(suggestions_table.c.id == suggestion_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_suggestion(row._asdict()) if row else None

    async def find_by_board(self, board_id: BoardId) -> List[Suggestion]:
        """Find all suggestions on a board, oldest first."""
        stmt = (
            select(suggestions_table)
            .where(suggestions_table.c.board_id == board_id)
            .order_by(suggestions_table.c.submitted_at.asc(), suggestions_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_suggestion(row._asdict()) for row in result.fetchall()]

    async def find_pending(self, board_id: Optional[BoardId] = None) -> List[Suggestion]:
        """Find pending suggestions, oldest first."""
        stmt = select(suggestions_table).where(
            suggestions_table.c.status == SuggestionStatus.PENDING.value
        )
        if board_id is not None:
            stmt = stmt.where(suggestions_table.c.board_id == board_id)
        stmt = stmt.order_by(suggestions_table.c.submitted_at.asc())

        result = await self.session.execute(stmt)
        return [row_to_suggestion(row._asdict()) for row in result.fetchall()]

    async def save(self, suggestion: Suggestion) -> Suggestion:
        """Save a suggestion (create or update)."""
        with logfire.span(
            "suggestion_repository.save", suggestion_id=str(suggestion.id)
        ):
            values = suggestion_to_dict(suggestion)
            stmt = insert(suggestions_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[suggestions_table.c.id],
                set_={
                    "text": values["text"],
                    "status": values["status"],
                    "visible": values["visible"],
                },
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return suggestion

    async def update_status(
        self,
        suggestion_id: SuggestionId,
        expected: SuggestionStatus,
        status: SuggestionStatus,
        visible: bool,
    ) -> Optional[Suggestion]:
        """Compare-and-set the status of a suggestion."""
        stmt = (
            update(suggestions_table)
            .where(
                and_(
                    suggestions_table.c.id == suggestion_id,
                    suggestions_table.c.status == expected.value,
                )
            )
            .values(status=status.value, visible=visible)
            .returning(*suggestions_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_suggestion(row._asdict()) if row else None

    async def update_visibility(
        self,
        board_id: BoardId,
        status: SuggestionStatus,
        visible: bool,
    ) -> int:
        """Set visibility for all suggestions on a board with a status."""
        stmt = (
            update(suggestions_table)
            .where(
                and_(
                    suggestions_table.c.board_id == board_id,
                    suggestions_table.c.status == status.value,
                )
            )
            .values(visible=visible)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete(self, suggestion_id: SuggestionId) -> bool:
        """Delete a suggestion. Votes cascade in the database."""
        stmt = delete(suggestions_table).where(suggestions_table.c.id == suggestion_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_board(self, board_id: BoardId) -> int:
        """Delete every suggestion on a board."""
        stmt = delete(suggestions_table).where(suggestions_table.c.board_id == board_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
