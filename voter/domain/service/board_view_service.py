"""Board view projection service."""

from collections import Counter
from typing import Iterable, Sequence

import logfire

from voter.domain.error import NotFoundError
from voter.domain.model import (
    Board,
    BoardSummary,
    BoardView,
    Suggestion,
    SuggestionView,
    Vote,
)
from voter.domain.repository import (
    BoardRepository,
    SuggestionRepository,
    VoteRepository,
)
from voter.domain.value import BoardId, SuggestionId, SuggestionStatus, Viewer

from .base import Service
from .suggestion_service import is_listed_for


def _tally(votes: Iterable[Vote]) -> Counter[SuggestionId]:
    return Counter(vote.suggestion_id for vote in votes)


def _public_totals(
    suggestions: Iterable[Suggestion], tally: Counter[SuggestionId]
) -> tuple[int, int]:
    """Count approved, visible suggestions and the votes they hold."""
    public = [
        s for s in suggestions if s.status == SuggestionStatus.APPROVED and s.visible
    ]
    return len(public), sum(tally[s.id] for s in public)


def _board_fields(board: Board) -> dict:
    return board.model_dump(
        include={
            "id",
            "title",
            "description",
            "created_by",
            "created_at",
            "suggestions_open",
            "voting_open",
            "closed",
            "require_approval",
            "voting_type",
            "max_votes",
        }
    )


class BoardViewService(Service):
    """Assembles read-facing board aggregates for a viewer."""

    def __init__(
        self,
        board_repository: BoardRepository,
        suggestion_repository: SuggestionRepository,
        vote_repository: VoteRepository,
    ) -> None:
        """Initialize board view service.

        Args:
            board_repository: Board repository
            suggestion_repository: Suggestion repository
            vote_repository: Vote repository
        """
        self.board_repository = board_repository
        self.suggestion_repository = suggestion_repository
        self.vote_repository = vote_repository

    @staticmethod
    def project(
        board: Board,
        suggestions: Sequence[Suggestion],
        votes: Iterable[Vote],
        viewer: Viewer,
    ) -> BoardView:
        """Build the board view seen by a viewer.

        Suggestions are filtered by visibility for the viewer and ordered by
        vote count, most votes first. Equal counts keep submission order.

        Args:
            board: The board
            suggestions: All suggestions on the board
            votes: All votes on the board's suggestions
            viewer: Who is looking

        Returns:
            Viewer-scoped board view
        """
        votes = list(votes)
        tally = _tally(votes)
        voted_ids: set[SuggestionId] = set()
        if not viewer.is_anonymous:
            voted_ids = {v.suggestion_id for v in votes if v.user_id == viewer.user_id}

        listed = sorted(
            (s for s in suggestions if is_listed_for(s, viewer)),
            key=lambda s: s.submitted_at,
        )
        # sort is stable, so ties stay oldest-first
        listed.sort(key=lambda s: tally[s.id], reverse=True)

        items = [
            SuggestionView(
                id=s.id,
                board_id=s.board_id,
                text=s.text,
                submitted_by=s.submitted_by,
                submitted_at=s.submitted_at,
                status=s.status,
                visible=s.visible,
                vote_count=tally[s.id],
                user_has_voted=s.id in voted_ids,
            )
            for s in listed
        ]

        suggestion_count, total_votes = _public_totals(suggestions, tally)
        return BoardView(
            **_board_fields(board),
            suggestion_count=suggestion_count,
            total_votes=total_votes,
            suggestions=items,
        )

    @staticmethod
    def summarize(
        board: Board, suggestions: Sequence[Suggestion], votes: Iterable[Vote]
    ) -> BoardSummary:
        """Build the board-list row for a board.

        Only approved, visible suggestions contribute to the counts.
        """
        suggestion_count, total_votes = _public_totals(suggestions, _tally(votes))
        return BoardSummary(
            **_board_fields(board),
            suggestion_count=suggestion_count,
            total_votes=total_votes,
        )

    async def get_board_view(self, board_id: BoardId, viewer: Viewer) -> BoardView:
        """Load a board and project it for a viewer.

        Raises:
            NotFoundError: If the board does not exist
        """
        with logfire.span(
            "board_view_service.get_board_view",
            board_id=str(board_id),
            viewer=str(viewer.user_id) if viewer.user_id else None,
            is_admin=viewer.is_admin,
        ):
            board = await self.board_repository.find_by_id(board_id)
            if not board:
                logfire.warn("Board not found", board_id=str(board_id))
                raise NotFoundError("Board", str(board_id))

            suggestions = await self.suggestion_repository.find_by_board(board_id)
            votes = await self.vote_repository.find_by_board(board_id)
            view = self.project(board, suggestions, votes, viewer)

            logfire.info(
                "Board view projected",
                board_id=str(board_id),
                listed=len(view.suggestions),
                total_votes=view.total_votes,
            )
            return view

    async def list_board_summaries(self) -> list[BoardSummary]:
        """Summaries of all boards, newest first."""
        with logfire.span("board_view_service.list_board_summaries"):
            boards = await self.board_repository.find_all()
            summaries = []
            for board in boards:
                suggestions = await self.suggestion_repository.find_by_board(board.id)
                votes = await self.vote_repository.find_by_board(board.id)
                summaries.append(self.summarize(board, suggestions, votes))

            logfire.info("Boards listed", count=len(summaries))
            return summaries
