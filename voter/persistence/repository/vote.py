"""PostgreSQL implementation of Vote repository."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

import logfire
from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from voter.domain.model import Vote
from voter.domain.repository import VoteRepository
from voter.domain.value import BoardId, SuggestionId, UserId
from voter.persistence.mappers import row_to_vote, vote_to_dict
from voter.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_suggestion(
        self, user_id: UserId, suggestion_id: SuggestionId
    ) -> Optional[Vote]:
        """Find a user's vote on a specific suggestion."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.suggestion_id == suggestion_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_board(self, board_id: BoardId) -> List[Vote]:
        """Find all votes on a board."""
        stmt = select(votes_table).where(votes_table.c.board_id == board_id)
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_user_and_board(
        self, user_id: UserId, board_id: BoardId
    ) -> List[Vote]:
        """Find a user's votes on a board."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.board_id == board_id,
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def count_by_user_and_board(self, user_id: UserId, board_id: BoardId) -> int:
        """Count a user's votes on a board."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(
                and_(
                    votes_table.c.user_id == user_id,
                    votes_table.c.board_id == board_id,
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_suggestion(self, suggestion_id: SuggestionId) -> int:
        """Count votes on a suggestion."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.suggestion_id == suggestion_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Runs inside a savepoint so a unique-constraint violation only rolls
        back this insert and leaves the request transaction usable.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return vote

    async def delete_by_user_and_suggestion(
        self, user_id: UserId, suggestion_id: SuggestionId
    ) -> bool:
        """Delete a user's vote on a suggestion."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.suggestion_id == suggestion_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_suggestion(self, suggestion_id: SuggestionId) -> int:
        """Delete all votes on a suggestion."""
        stmt = delete(votes_table).where(votes_table.c.suggestion_id == suggestion_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete_by_board(self, board_id: BoardId) -> int:
        """Delete all votes on a board."""
        stmt = delete(votes_table).where(votes_table.c.board_id == board_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    @asynccontextmanager
    async def lock_ballot(
        self, board_id: BoardId, user_id: UserId
    ) -> AsyncIterator[None]:
        """Take a transaction-scoped advisory lock for (board, user).

        The lock is held until the request transaction commits or rolls back,
        so leaving the context does not release it early.
        """
        key = f"ballot:{board_id}:{user_id}"
        with logfire.span("vote_repository.lock_ballot", key=key):
            await self.session.execute(
                select(func.pg_advisory_xact_lock(func.hashtextextended(key, 0)))
            )
        yield
