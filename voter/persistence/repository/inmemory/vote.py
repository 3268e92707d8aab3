"""In-memory vote repository for testing."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.exc import IntegrityError

from voter.domain.model import Vote
from voter.domain.repository import VoteRepository
from voter.domain.value import BoardId, SuggestionId, UserId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []
        self._ballot_locks: dict[tuple[BoardId, UserId], asyncio.Lock] = {}
        # Coroutines holding or waiting on each lock
        self._ballot_users: dict[tuple[BoardId, UserId], int] = {}

    async def find_by_user_and_suggestion(
        self, user_id: UserId, suggestion_id: SuggestionId
    ) -> Optional[Vote]:
        """Find a user's vote on a specific suggestion."""
        for vote in self._votes:
            if vote.user_id == user_id and vote.suggestion_id == suggestion_id:
                return vote
        return None

    async def find_by_board(self, board_id: BoardId) -> list[Vote]:
        """Find all votes on a board."""
        return [v for v in self._votes if v.board_id == board_id]

    async def find_by_user_and_board(
        self, user_id: UserId, board_id: BoardId
    ) -> list[Vote]:
        """Find a user's votes on a board."""
        return [
            v for v in self._votes if v.user_id == user_id and v.board_id == board_id
        ]

    async def count_by_user_and_board(self, user_id: UserId, board_id: BoardId) -> int:
        """Count a user's votes on a board."""
        return sum(
            1 for v in self._votes if v.user_id == user_id and v.board_id == board_id
        )

    async def count_by_suggestion(self, suggestion_id: SuggestionId) -> int:
        """Count votes on a suggestion."""
        return sum(1 for v in self._votes if v.suggestion_id == suggestion_id)

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the user already voted on the suggestion
        """
        # Mirrors the (suggestion_id, user_id) unique constraint
        if any(
            v.user_id == vote.user_id and v.suggestion_id == vote.suggestion_id
            for v in self._votes
        ):
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def delete_by_user_and_suggestion(
        self, user_id: UserId, suggestion_id: SuggestionId
    ) -> bool:
        """Delete a user's vote on a suggestion."""
        for i, vote in enumerate(self._votes):
            if vote.user_id == user_id and vote.suggestion_id == suggestion_id:
                self._votes.pop(i)
                return True
        return False

    async def delete_by_suggestion(self, suggestion_id: SuggestionId) -> int:
        """Delete all votes on a suggestion."""
        before = len(self._votes)
        self._votes = [v for v in self._votes if v.suggestion_id != suggestion_id]
        return before - len(self._votes)

    async def delete_by_board(self, board_id: BoardId) -> int:
        """Delete all votes on a board."""
        before = len(self._votes)
        self._votes = [v for v in self._votes if v.board_id != board_id]
        return before - len(self._votes)

    @asynccontextmanager
    async def lock_ballot(
        self, board_id: BoardId, user_id: UserId
    ) -> AsyncIterator[None]:
        """Serialize ballot changes for one user on one board.

        The lock is dropped once nobody holds or waits on it.
        """
        key = (board_id, user_id)
        lock = self._ballot_locks.setdefault(key, asyncio.Lock())
        self._ballot_users[key] = self._ballot_users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._ballot_users[key] -= 1
            if not self._ballot_users[key]:
                del self._ballot_users[key]
                del self._ballot_locks[key]
