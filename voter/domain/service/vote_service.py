"""Vote eligibility domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from voter.config import VotingSettings
from voter.domain.error import (
    BoardClosedError,
    DuplicateVoteError,
    SuggestionNotApprovedError,
    VoteLimitExceededError,
    VoteNotFoundError,
    VotingClosedError,
)
from voter.domain.model.board import Board
from voter.domain.model.suggestion import Suggestion
from voter.domain.model.vote import Vote
from voter.domain.repository import VoteRepository
from voter.domain.value import BoardId, SuggestionId, SuggestionStatus, UserId, VoteId

from .base import Service


class VoteService(Service):
    """Domain service deciding whether a vote may be cast or retracted.

    The (suggestion, user) uniqueness rule is ultimately enforced by the
    repository's unique constraint; the lookup done here only gives a fast,
    clear error. The per-board vote limit is a count over several rows, so it
    is only exact when ballots are serialized through the repository lock.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            voting_settings: Voting configuration
        """
        self.vote_repository = vote_repository
        self.voting_settings = voting_settings

    async def cast_vote(
        self, suggestion: Suggestion, board: Board, user_id: UserId
    ) -> Vote:
        """Cast a vote on a suggestion.

        Checks run in a fixed order and the first failure is reported.

        Args:
            suggestion: Suggestion to vote on
            board: Board the suggestion belongs to
            user_id: Voting user ID

        Returns:
            Created vote

        Raises:
            VotingClosedError: If voting is not open on the board
            BoardClosedError: If the board is closed
            SuggestionNotApprovedError: If the suggestion is not approved
            DuplicateVoteError: If the user already voted on the suggestion
            VoteLimitExceededError: If the user has no votes left on the board
        """
        with logfire.span(
            "vote_service.cast_vote",
            suggestion_id=str(suggestion.id),
            board_id=str(board.id),
            user_id=str(user_id),
        ):
            if suggestion.board_id != board.id:
                raise ValueError("Suggestion does not belong to this board")

            if not board.voting_open:
                logfire.warn("Vote on board with voting closed", board_id=str(board.id))
                raise VotingClosedError(str(board.id))

            if board.closed:
                logfire.warn("Vote on closed board", board_id=str(board.id))
                raise BoardClosedError(str(board.id))

            if suggestion.status != SuggestionStatus.APPROVED:
                logfire.warn(
                    "Vote on unapproved suggestion",
                    suggestion_id=str(suggestion.id),
                    status=suggestion.status.value,
                )
                raise SuggestionNotApprovedError(str(suggestion.id))

            if self.voting_settings.serialize_ballots:
                async with self.vote_repository.lock_ballot(board.id, user_id):
                    return await self._record_vote(suggestion, board, user_id)

            return await self._record_vote(suggestion, board, user_id)

    async def _record_vote(
        self, suggestion: Suggestion, board: Board, user_id: UserId
    ) -> Vote:
        existing = await self.vote_repository.find_by_user_and_suggestion(
            user_id, suggestion.id
        )
        if existing:
            logfire.warn(
                "Duplicate vote attempt",
                user_id=str(user_id),
                suggestion_id=str(suggestion.id),
            )
            raise DuplicateVoteError(str(suggestion.id), str(user_id))

        await self._check_vote_limit(board, user_id)

        vote = Vote(
            id=VoteId(uuid4()),
            suggestion_id=suggestion.id,
            board_id=board.id,
            user_id=user_id,
            created_at=datetime.now(),
        )

        try:
            saved_vote = await self.vote_repository.save(vote)
        except IntegrityError:
            # A concurrent request inserted the same pair after our lookup
            logfire.warn(
                "Duplicate vote rejected by unique constraint",
                user_id=str(user_id),
                suggestion_id=str(suggestion.id),
            )
            raise DuplicateVoteError(str(suggestion.id), str(user_id)) from None

        logfire.info(
            "Vote cast",
            vote_id=str(saved_vote.id),
            suggestion_id=str(suggestion.id),
            user_id=str(user_id),
        )
        return saved_vote

    async def _check_vote_limit(self, board: Board, user_id: UserId) -> None:
        limit = board.vote_limit
        if limit is None:
            return

        used = await self.vote_repository.count_by_user_and_board(user_id, board.id)
        if used >= limit:
            logfire.warn(
                "Vote limit reached",
                board_id=str(board.id),
                user_id=str(user_id),
                voting_type=board.voting_type.value,
                limit=limit,
                used=used,
            )
            raise VoteLimitExceededError(str(board.id), limit)

    async def retract_vote(self, suggestion: Suggestion, user_id: UserId) -> None:
        """Remove a user's vote from a suggestion.

        Board and suggestion state are not checked: removing a vote can never
        produce an invalid state, so it is allowed even on closed boards.

        Args:
            suggestion: Suggestion the vote was cast on
            user_id: User ID

        Raises:
            VoteNotFoundError: If the user has no vote on the suggestion
        """
        with logfire.span(
            "vote_service.retract_vote",
            suggestion_id=str(suggestion.id),
            user_id=str(user_id),
        ):
            deleted = await self.vote_repository.delete_by_user_and_suggestion(
                user_id, suggestion.id
            )
            if not deleted:
                logfire.info(
                    "No vote to retract",
                    suggestion_id=str(suggestion.id),
                    user_id=str(user_id),
                )
                raise VoteNotFoundError(str(suggestion.id), str(user_id))

            logfire.info(
                "Vote retracted",
                suggestion_id=str(suggestion.id),
                user_id=str(user_id),
            )

    async def get_user_votes_on_board(
        self, board_id: BoardId, user_id: UserId
    ) -> list[Vote]:
        """List a user's votes on a board."""
        return await self.vote_repository.find_by_user_and_board(user_id, board_id)

    async def count_votes(self, suggestion_id: SuggestionId) -> int:
        """Count votes on a suggestion."""
        return await self.vote_repository.count_by_suggestion(suggestion_id)
